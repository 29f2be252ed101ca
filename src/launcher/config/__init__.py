"""Configuration snapshot, codec, store and background load/save operations."""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigFileNotFoundError,
    ConfigReadError,
    MalformedDocumentError,
    MalformedPathError,
    MalformedPackageReferenceError,
    WriteFailedError,
    UnsupportedOperatingSystemError,
)
from .model import Config, GameConfig, create_default_config  # noqa: F401
from .adapters import PathAdapter, PackageReferenceAdapter, TypeAdapter  # noqa: F401
from .codec import ConfigCodec  # noqa: F401
from .operations import (  # noqa: F401
    OperationState,
    OperationResult,
    ConfigOperation,
    ConfigReader,
    ConfigWriter,
)
from .store import ConfigStore, CONFIG_FILE  # noqa: F401

__all__ = [
    # Errors
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "MalformedDocumentError",
    "MalformedPathError",
    "MalformedPackageReferenceError",
    "WriteFailedError",
    "UnsupportedOperatingSystemError",
    # Snapshot
    "Config",
    "GameConfig",
    "create_default_config",
    # Codec
    "ConfigCodec",
    "TypeAdapter",
    "PathAdapter",
    "PackageReferenceAdapter",
    # Store & operations
    "ConfigStore",
    "CONFIG_FILE",
    "OperationState",
    "OperationResult",
    "ConfigOperation",
    "ConfigReader",
    "ConfigWriter",
]
