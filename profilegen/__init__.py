"""profilegen - live-stats profile README generator."""

from profilegen._version import __version__
from profilegen.models.profile import ProfileRecord
from profilegen.models.stats import GitHubStats, HostStats, LeetCodeStats, PracticeStats
from profilegen.models.result import UpdateResult
from profilegen.config import GeneratorConfig
from profilegen.core.orchestrator import ReadmeUpdater, render_stored
from profilegen.render.sections import render_readme
from profilegen.store.yaml_store import YamlProfileStore

__all__ = [
    # Main interface
    "ReadmeUpdater",
    "GeneratorConfig",
    "render_readme",
    "render_stored",
    "YamlProfileStore",
    # Models
    "ProfileRecord",
    "HostStats",
    "PracticeStats",
    "GitHubStats",
    "LeetCodeStats",
    "UpdateResult",
    "__version__",
]
