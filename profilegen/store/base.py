"""Abstract profile store interface."""

from abc import ABC, abstractmethod

from profilegen.models.profile import ProfileRecord


class ProfileStore(ABC):
    """Abstract base class for profile record storage."""

    @abstractmethod
    def load(self) -> ProfileRecord:
        """
        Read the profile record.

        Returns:
            Parsed ProfileRecord

        Raises:
            ConfigError: Record missing or invalid
        """
        ...

    @abstractmethod
    def save(self, record: ProfileRecord) -> None:
        """
        Write the record back to the location it was loaded from.

        Args:
            record: ProfileRecord to persist

        Raises:
            StorageError: Write failed
        """
        ...
