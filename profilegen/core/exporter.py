"""Output utilities for rendered documents and run results."""

from pathlib import Path

from profilegen.exceptions import StorageError
from profilegen.models.result import UpdateResult


def write_document(text: str, filepath: str | Path) -> Path:
    """
    Write a rendered document, replacing any previous content.

    Args:
        text: Document text
        filepath: Destination path

    Returns:
        Path to the written file

    Raises:
        StorageError: Destination not writable
    """
    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}") from e
    return path


def to_dict(result: UpdateResult) -> dict:
    """
    Convert UpdateResult to a dictionary without the document body.

    Args:
        result: UpdateResult to convert

    Returns:
        Dictionary representation
    """
    return result.model_dump(mode="json", exclude={"document"})


def summary_dict(result: UpdateResult) -> dict:
    """The three headline numbers logged at the end of a run."""
    return {
        "github_followers": result.github_stats.followers,
        "leetcode_solved": result.leetcode_stats.total_solved,
        "total_contributions": result.github_stats.total_contributions,
    }
