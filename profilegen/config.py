"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from profilegen._version import __version__


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class GeneratorConfig(BaseSettings):
    """Configuration for the profile README generator."""

    # Identities
    github_username: str = "AbirpandA"
    leetcode_username: str = "CTp4b4787R"
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "PROFILEGEN_GITHUB_TOKEN",
            "GH_TOKEN",
            "GITHUB_TOKEN",
        ),
    )

    # Paths
    profile_path: str = "data/profile.yaml"
    readme_path: str = "README.md"

    # Remote APIs
    github_api_url: str = "https://api.github.com"
    leetcode_api_url: str = "https://leetcode-stats-api.herokuapp.com"
    user_agent: str = f"profilegen/{__version__}"
    request_timeout_seconds: float | None = 30.0

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "PROFILEGEN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def github_headers(self) -> dict[str, str]:
        """Headers for the identity-scoped GitHub calls."""
        headers = {"Accept": "application/vnd.github+json"}
        if self.github_token:
            headers["Authorization"] = f"token {self.github_token}"
        return headers
