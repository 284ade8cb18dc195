"""Configuration exceptions: config files, options, output specifications."""

from typing import Any

from .base import ArtifactSizeError


class ConfigurationError(ArtifactSizeError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class DuplicateArtifactError(ConfigurationError):
    """Raised when two artifacts in one config share an id."""

    def __init__(self, artifact_id: str):
        super().__init__(f'Duplicate artifact id "{artifact_id}" found in config')
        self.artifact_id = artifact_id


class InvalidOutputSpecError(ConfigurationError):
    """Raised when a ``format:key`` output specification cannot be parsed."""

    def __init__(self, message: str, param_name: str):
        super().__init__(message, details={"param": param_name})
        self.param_name = param_name
