"""Error taxonomy for configuration loading and saving.

Every error here is recoverable: it is captured on the failing operation's
result and reported to the invoker, and the store keeps its current snapshot.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "MalformedDocumentError",
    "MalformedPathError",
    "MalformedPackageReferenceError",
    "WriteFailedError",
    "UnsupportedOperatingSystemError",
]


class ConfigError(RuntimeError):
    """Base class for all configuration errors."""


class ConfigFileNotFoundError(ConfigError):
    """Raised by a load when no config file exists yet (nothing to load)."""

    def __init__(self, path: Path):
        super().__init__(f"Config file not found: {path}")
        self.path = path


class ConfigReadError(ConfigError):
    """Raised when an existing config file cannot be read."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Cannot read config file {path}: {cause}")
        self.path = path
        self.cause = cause


class MalformedDocumentError(ConfigError):
    """The document is empty, not valid JSON or does not match the schema."""


class MalformedPathError(MalformedDocumentError):
    def __init__(self, value: object, reason: str):
        super().__init__(f"Malformed path {value!r}: {reason}")
        self.value = value


class MalformedPackageReferenceError(MalformedDocumentError):
    def __init__(self, value: object, reason: str):
        super().__init__(f"Malformed package reference {value!r}: {reason}")
        self.value = value


class WriteFailedError(ConfigError):
    """Raised by a save when the file cannot be written."""

    def __init__(self, path: Path, cause: Optional[BaseException]):
        super().__init__(f"Cannot write config file {path}: {cause}")
        self.path = path
        self.cause = cause


class UnsupportedOperatingSystemError(ConfigError):
    """The host operating system has no known directory layout."""
