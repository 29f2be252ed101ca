"""Resolution of the per-user launcher directory.

The returned directory is where ``config.json`` and the default game
install/data directories live. Resolution never raises: an unrecognized
operating system is reported with a warning and the user's home directory
is used as the base instead.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .os_info import OperatingSystem

__all__ = ["LAUNCHER_APPLICATION_DIR_NAME", "get_application_directory"]

logger = logging.getLogger(__name__)

LAUNCHER_APPLICATION_DIR_NAME = "TerasologyLauncher"


def get_application_directory(
    operating_system: OperatingSystem,
    application_name: str,
    *,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return a writable per-user directory for ``application_name``.

    Parameters
    ----------
    operating_system: Host OS family the directory layout is chosen for.
    application_name: Directory name (lower-cased and dot-prefixed on Linux).
    home: Override for the user's home directory (tests).
    environ: Override for the process environment (tests).
    """
    base = home if home is not None else Path.home()
    env = environ if environ is not None else os.environ

    if operating_system is OperatingSystem.WINDOWS:
        appdata = env.get("APPDATA")
        root = Path(appdata) if appdata else base / "AppData" / "Roaming"
        return root / application_name
    if operating_system is OperatingSystem.MAC_OSX:
        return base / "Library" / "Application Support" / application_name
    if operating_system is OperatingSystem.LINUX:
        return base / f".{application_name.lower()}"

    logger.warning(
        "No directory layout for operating system %s; using %s",
        operating_system.value,
        base / application_name,
    )
    return base / application_name
