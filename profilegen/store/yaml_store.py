"""YAML file-backed profile store."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from profilegen.exceptions import ConfigError, StorageError
from profilegen.logging import get_logger
from profilegen.models.profile import ProfileRecord
from profilegen.store.base import ProfileStore


class YamlProfileStore(ProfileStore):
    """Profile record kept in a single YAML document."""

    def __init__(self, path: str | Path = "data/profile.yaml", line_width: int = 120):
        """
        Initialize YAML store.

        Args:
            path: Path to the profile YAML file
            line_width: Preferred line width when dumping
        """
        self.path = Path(path)
        self.line_width = line_width
        self._loaded = False
        self._log = get_logger("store")

    def load(self) -> ProfileRecord:
        if not self.path.is_file():
            raise ConfigError(f"Profile data not found: {self.path}")

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {self.path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{self.path} must contain a mapping at the top level")

        try:
            record = ProfileRecord.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid profile data in {self.path}: {e}") from e

        self._loaded = True
        self._log.info("profile_loaded", path=str(self.path))
        return record

    def save(self, record: ProfileRecord) -> None:
        if not self._loaded:
            raise StorageError(f"{self.path} must be loaded before it is saved")

        text = yaml.safe_dump(
            record.to_document(),
            sort_keys=False,
            allow_unicode=True,
            width=self.line_width,
        )
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        self._log.info("profile_saved", path=str(self.path))
