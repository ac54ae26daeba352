"""Live statistics models: fetched results and their stored counterparts."""

import math
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def to_int(value: Any) -> int:
    """
    Coerce an API or YAML value to an integer count.

    Examples:
        145 -> 145
        "63" -> 63
        "52.3" -> 52
        None -> 0
        "n/a" -> 0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    text = str(value).strip().replace(",", "")
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return 0
    return int(number) if math.isfinite(number) else 0


def to_float(value: Any) -> float:
    """Coerce an API or YAML value to a float, non-numeric values become 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip().rstrip("%")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_stamp(value: Any) -> datetime | date | str | None:
    """Dates written unquoted in YAML stay dates so they save back unquoted."""
    if value is None or isinstance(value, date):
        return value
    return str(value)


Count = Annotated[int, BeforeValidator(to_int)]
Rate = Annotated[float, BeforeValidator(to_float)]
DateStamp = Annotated[datetime | date | str | None, BeforeValidator(to_stamp)]


class HostStats(BaseModel):
    """Fetched GitHub user statistics."""

    model_config = ConfigDict(frozen=True)

    followers: Count = 0
    following: Count = 0
    public_repos: Count = 0
    # Stand-in: repository count, not an aggregate of stargazers
    total_stars: Count = 0


class PracticeStats(BaseModel):
    """Fetched LeetCode statistics."""

    model_config = ConfigDict(frozen=True)

    total_solved: Count = 0
    easy: Count = 0
    medium: Count = 0
    hard: Count = 0
    acceptance_rate: Rate = 0.0


class GitHubStats(BaseModel):
    """Stored `github_stats` sub-record of the profile."""

    model_config = ConfigDict(extra="allow")

    followers: Count = 0
    following: Count = 0
    public_repos: Count = 0
    total_stars: Count = 0
    total_contributions: Count = 0
    last_updated: DateStamp = None


class LeetCodeStats(BaseModel):
    """Stored `leetcode_stats` sub-record of the profile."""

    model_config = ConfigDict(extra="allow")

    total_solved: Count = 0
    easy: Count = 0
    medium: Count = 0
    hard: Count = 0
    acceptance_rate: Rate = 0.0
    last_updated: DateStamp = None
