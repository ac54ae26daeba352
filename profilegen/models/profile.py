"""Profile record model backed by the YAML data file."""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

from profilegen.models.stats import GitHubStats, LeetCodeStats


def to_scalar(value: Any) -> Any:
    """
    Flatten a hand-written YAML value to a single displayable scalar.

    Examples:
        24 -> 24
        ["Pune", "India"] -> "Pune, India"
        {"city": "Pune"} -> "city: Pune"
    """
    if value is None or isinstance(value, (str, int, float, bool, date)):
        return value
    if isinstance(value, dict):
        return ", ".join(f"{key}: {to_scalar(item)}" for key, item in value.items())
    if isinstance(value, (list, tuple, set)):
        return ", ".join(str(to_scalar(item)) for item in value if item is not None)
    return str(value)


def to_scalar_list(value: Any) -> list[Any] | None:
    """A single value becomes a one-item list; null items are dropped."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple, set)):
        value = [value]
    return [to_scalar(item) for item in value if item is not None]


def to_project_entries(value: Any) -> Any:
    """Project entries given as bare names become `{name: ...}`; nulls are dropped."""
    if value is None:
        return None

    def entry(item: Any) -> Any:
        return item if isinstance(item, dict) else {"name": to_scalar(item)}

    if isinstance(value, dict):
        return {str(key): entry(item) for key, item in value.items() if item is not None}
    if not isinstance(value, (list, tuple)):
        value = [value]
    return [entry(item) for item in value if item is not None]


# Free-text fields keep whatever scalar the YAML author wrote (age: 24)
Scalar = Annotated[str | int | float | bool | datetime | date, BeforeValidator(to_scalar)]
ScalarList = Annotated[list[Scalar], BeforeValidator(to_scalar_list)]


class Section(BaseModel):
    """Base for editable profile sections; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")


class ProfileInfo(Section):
    name: Scalar | None = None
    title: Scalar | None = None
    location: Scalar | None = None
    age: Scalar | None = None
    timezone: Scalar | None = None
    tagline: Scalar | None = None
    motto: Scalar | None = None


class TechStack(Section):
    languages: ScalarList | None = None
    frontend: ScalarList | None = None
    backend: ScalarList | None = None
    databases: ScalarList | None = None
    tools: ScalarList | None = None


class Mission(Section):
    status: Scalar | None = None
    mode: Scalar | None = None
    weapons: ScalarList | None = None
    weaknesses: ScalarList | None = None
    next_level: Scalar | None = None


class Project(Section):
    name: Scalar | None = None
    description: Scalar | None = None
    tech: ScalarList | None = None
    status: Scalar | None = None


class Goals(Section):
    short_term: ScalarList | None = None
    long_term: ScalarList | None = None


class Social(Section):
    github: Scalar | None = None
    linkedin: Scalar | None = None
    twitter: Scalar | None = None
    email: Scalar | None = None
    portfolio: Scalar | None = None


class ProfileRecord(Section):
    """
    The single persisted profile document.

    Every section is optional; rendering supplies defaults. Only keys that
    were present in the source file (or assigned by a merge) are written
    back, so a load/save cycle leaves the file content unchanged.
    """

    profile: ProfileInfo | None = None
    tech_stack: TechStack | None = None
    current_mission: Mission | None = None
    current_projects: Annotated[
        list[Project] | dict[str, Project] | None, BeforeValidator(to_project_entries)
    ] = None
    goals: Goals | None = None
    social: Social | None = None
    github_stats: GitHubStats | None = None
    leetcode_stats: LeetCodeStats | None = None

    def projects(self) -> list[Project]:
        """Projects in file order, whether stored as a list or a mapping."""
        if not self.current_projects:
            return []
        if isinstance(self.current_projects, dict):
            return list(self.current_projects.values())
        return list(self.current_projects)

    def to_document(self) -> dict[str, Any]:
        """Plain mapping for YAML serialization."""
        data = self.model_dump(mode="python", exclude_unset=True)
        # Stats sub-records are written in full once present
        if "github_stats" in data and self.github_stats is not None:
            data["github_stats"] = self.github_stats.model_dump(mode="python", exclude_none=True)
        if "leetcode_stats" in data and self.leetcode_stats is not None:
            data["leetcode_stats"] = self.leetcode_stats.model_dump(mode="python", exclude_none=True)
        return data
