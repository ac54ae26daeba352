"""Custom exception hierarchy for profilegen."""


class ProfileGenError(Exception):
    """Base exception for all profilegen errors."""


class TransportError(ProfileGenError):
    """Network or connection failure during a remote call."""


class PayloadError(ProfileGenError):
    """Response body missing or not shaped as expected."""


class ConfigError(ProfileGenError):
    """Profile data file missing, unreadable or invalid."""


class StorageError(ProfileGenError):
    """Failed to write the profile or the rendered document."""
