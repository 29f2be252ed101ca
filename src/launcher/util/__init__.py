"""OS, directory and game-runtime helper types."""

from .os_info import OperatingSystem, describe_host  # noqa: F401
from .directories import LAUNCHER_APPLICATION_DIR_NAME, get_application_directory  # noqa: F401
from .java_heap_size import JavaHeapSize  # noqa: F401
from .log_level import LogLevel  # noqa: F401

__all__ = [
    "OperatingSystem",
    "describe_host",
    "LAUNCHER_APPLICATION_DIR_NAME",
    "get_application_directory",
    "JavaHeapSize",
    "LogLevel",
]
