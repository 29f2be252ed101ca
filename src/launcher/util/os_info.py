"""Host operating system detection.

Only the three desktop families the launcher ships for are distinguished;
anything else maps to ``UNKNOWN`` and callers fall back to best-effort
behaviour.
"""

from __future__ import annotations

import platform
from enum import Enum

__all__ = ["OperatingSystem", "describe_host"]


class OperatingSystem(Enum):
    WINDOWS = "windows"
    MAC_OSX = "macosx"
    LINUX = "linux"
    UNKNOWN = "unknown"

    @property
    def is_windows(self) -> bool:
        return self is OperatingSystem.WINDOWS

    @classmethod
    def from_system_name(cls, name: str | None) -> "OperatingSystem":
        """Map a ``platform.system()`` style name onto an enum member."""
        lowered = (name or "").strip().lower()
        if lowered.startswith("win") or lowered.startswith("cygwin"):
            return cls.WINDOWS
        if lowered in ("darwin", "mac os x", "macos"):
            return cls.MAC_OSX
        if lowered == "linux":
            return cls.LINUX
        return cls.UNKNOWN

    @classmethod
    def detect(cls) -> "OperatingSystem":
        return cls.from_system_name(platform.system())


def describe_host() -> str:
    """Short ``name release machine`` string used in diagnostics."""
    return f"{platform.system()} {platform.release()} {platform.machine()}".strip()
