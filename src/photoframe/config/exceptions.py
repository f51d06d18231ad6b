"""Custom exceptions for configuration management."""

from photoframe.errors import PhotoFrameError


class ConfigError(PhotoFrameError):
    """Raised when configuration data cannot be processed."""


class ExclusionPatternError(ConfigError):
    """Raised when a skip pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Regular expression '{pattern}' is not valid: {reason}")
        self.pattern = pattern
        self.reason = reason
