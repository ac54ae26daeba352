"""Fixed-width box layout primitives.

Every box line is CONTENT_WIDTH characters between its two border
characters. All padding and truncation goes through `pad_or_truncate`
and `truncate`, so section builders never do width arithmetic themselves.
"""

import re
from collections.abc import Iterable
from typing import Any

CONTENT_WIDTH = 73
LABEL_WIDTH = 18
ELLIPSIS = "..."
BULLET = " • "

_WHITESPACE = re.compile(r"\s+")


def text(value: Any, default: str = "") -> str:
    """Render a field value on one line; None becomes `default`."""
    if value is None:
        return default
    return _WHITESPACE.sub(" ", str(value)).strip()


def join_items(items: Iterable[Any] | None, separator: str = BULLET) -> str:
    return separator.join(text(item) for item in items or [])


def truncate(value: str, budget: int) -> str:
    """Cut `value` to at most `budget` characters, marking the cut."""
    if budget <= 0:
        return ""
    if len(value) <= budget:
        return value
    if budget <= len(ELLIPSIS):
        return value[:budget]
    return value[: budget - len(ELLIPSIS)] + ELLIPSIS


def pad_or_truncate(value: str, width: int = CONTENT_WIDTH) -> str:
    """Exactly `width` characters: right-padded with spaces or cut."""
    return value[:width].ljust(width)


def row(content: str = "", left: str = "│", right: str = "│") -> str:
    return f"{left}{pad_or_truncate(content)}{right}"


def fitted_row(prefix: str, value: str) -> str:
    """A row whose value is shortened to fit after a fixed prefix."""
    return row(prefix + truncate(value, CONTENT_WIDTH - len(prefix)))


def label_row(label: str, value: Any, default: str = "") -> str:
    return fitted_row(f"  {label:<{LABEL_WIDTH}}", text(value, default))


def stat_row(label: str, value: Any) -> str:
    return fitted_row(f"  │  {label:<{LABEL_WIDTH}}", text(value))


def item_rows(items: Iterable[Any] | None, marker: str) -> list[str]:
    """One row per element, in the given order."""
    return [fitted_row(f"    {marker} ", text(item)) for item in items or []]


def section_header(icon: str, title: str) -> str:
    head = pad_or_truncate(f"─ {icon} {title} ", min(CONTENT_WIDTH, len(icon) + len(title) + 4))
    return f"┌{head}{'─' * (CONTENT_WIDTH - len(head))}┐"


def section_footer() -> str:
    return f"└{'─' * CONTENT_WIDTH}┘"


def double_top() -> str:
    return f"╔{'═' * CONTENT_WIDTH}╗"


def double_bottom() -> str:
    return f"╚{'═' * CONTENT_WIDTH}╝"


def double_row(content: str = "") -> str:
    return row(content, left="║", right="║")


def box(icon: str, title: str, body: list[str]) -> list[str]:
    """Single-line box with a titled header and a blank row at the top."""
    return [section_header(icon, title), row(), *body, section_footer()]
