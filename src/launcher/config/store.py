"""Process-wide configuration store.

The store owns the current :class:`~launcher.config.model.Config` snapshot,
the resolved launcher directory and the codec used to persist it. A default
snapshot is installed during construction, so :meth:`ConfigStore.current_snapshot`
never returns ``None`` even before the file has been loaded.

The shared instance is created lazily by :meth:`ConfigStore.get_or_create`
under a lock (at most one construction, even with concurrent first callers)
and lives until process exit. Direct construction is reserved for the
application bootstrap and tests, which inject ``launcher_dir`` / ``codec``.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import ClassVar, Optional

from launcher.util.directories import LAUNCHER_APPLICATION_DIR_NAME, get_application_directory
from launcher.util.os_info import OperatingSystem, describe_host

from .codec import ConfigCodec
from .errors import UnsupportedOperatingSystemError
from .model import Config, create_default_config
from .operations import ConfigReader, ConfigWriter

__all__ = ["ConfigStore", "CONFIG_FILE"]

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


class ConfigStore:
    _instance: ClassVar[Optional["ConfigStore"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        launcher_dir: Path | str | None = None,
        *,
        operating_system: Optional[OperatingSystem] = None,
        codec: Optional[ConfigCodec] = None,
    ):
        self.operating_system = operating_system or OperatingSystem.detect()
        self.startup_error: Optional[UnsupportedOperatingSystemError] = None
        if self.operating_system is OperatingSystem.UNKNOWN:
            logger.error("Unsupported OS: %s", describe_host())
            self.startup_error = UnsupportedOperatingSystemError(
                f"Unsupported OS: {describe_host()}"
            )

        if launcher_dir is None:
            self._launcher_dir = get_application_directory(
                self.operating_system, LAUNCHER_APPLICATION_DIR_NAME
            )
        else:
            self._launcher_dir = Path(launcher_dir)
        self._config_path = self._launcher_dir / CONFIG_FILE
        self._config: Config = create_default_config(self._launcher_dir)
        self._codec = codec or ConfigCodec(operating_system=self.operating_system)

        self._reader = ConfigReader(self)
        self._writer = ConfigWriter(self)
        logger.debug("Config store initialised at %s", self._config_path)

    # Shared instance --------------------------------------------------
    @classmethod
    def get_or_create(cls) -> "ConfigStore":
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    instance = cls()
                    cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance (tests only); waits for running operations."""
        with cls._instance_lock:
            instance = cls._instance
            cls._instance = None
        if instance is not None:
            instance.reader.wait()
            instance.writer.wait()

    # Snapshot ---------------------------------------------------------
    def current_snapshot(self) -> Config:
        return self._config

    def install_snapshot(self, config: Config) -> None:
        self._config = config

    # Accessors --------------------------------------------------------
    def storage_location(self) -> Path:
        return self._config_path

    @property
    def launcher_dir(self) -> Path:
        return self._launcher_dir

    @property
    def codec(self) -> ConfigCodec:
        return self._codec

    @property
    def reader(self) -> ConfigReader:
        """Load operation; start it from the thread owning the event loop."""
        return self._reader

    @property
    def writer(self) -> ConfigWriter:
        """Save operation; start it from the thread owning the event loop."""
        return self._writer
