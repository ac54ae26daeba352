"""Pydantic models for profilegen."""

from profilegen.models.profile import (
    Goals,
    Mission,
    ProfileInfo,
    ProfileRecord,
    Project,
    Social,
    TechStack,
)
from profilegen.models.stats import (
    GitHubStats,
    HostStats,
    LeetCodeStats,
    PracticeStats,
)
from profilegen.models.result import UpdateResult

__all__ = [
    "ProfileRecord",
    "ProfileInfo",
    "TechStack",
    "Mission",
    "Project",
    "Goals",
    "Social",
    "HostStats",
    "PracticeStats",
    "GitHubStats",
    "LeetCodeStats",
    "UpdateResult",
]
