"""Update run result wrapper model."""

from datetime import datetime

from pydantic import BaseModel

from profilegen.models.stats import GitHubStats, LeetCodeStats


class UpdateResult(BaseModel):
    """Summary of one README update run."""

    success: bool
    github_stats: GitHubStats
    leetcode_stats: LeetCodeStats
    degraded: list[str] = []
    profile_path: str
    readme_path: str
    document_written: bool = False
    profile_saved: bool = False
    document: str | None = None
    started_at: datetime
    duration_ms: float
