"""Background load/save operations for the config store.

Each operation is a small state machine (``IDLE -> RUNNING -> SUCCEEDED |
FAILED``) whose task runs on its own ``QThread`` so the GUI thread only
starts it and observes the outcome. A start request while the operation is
``RUNNING`` is rejected rather than queued; a completed operation can be
started again (or explicitly :meth:`~ConfigOperation.reset`).

Outcome reporting:
 - ``state`` / ``result`` are updated on the worker thread *before* any
   completion signal is emitted, so ``wait()`` followed by reading ``result``
   is always consistent.
 - Signals ``started``, ``progress(event, payload)``, ``succeeded(config)``,
   ``failed(error)`` and ``finished(result)`` follow normal Qt delivery rules
   (queued to receivers living on other threads).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from launcher.core import filesystem

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigReadError,
    WriteFailedError,
)
from .model import Config

if TYPE_CHECKING:  # pragma: no cover
    from .store import ConfigStore

__all__ = [
    "OperationState",
    "OperationResult",
    "ConfigOperation",
    "ConfigReader",
    "ConfigWriter",
]

logger = logging.getLogger(__name__)


class OperationState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult:
    state: OperationState
    config: Optional[Config] = None
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.state is OperationState.SUCCEEDED


class _OperationWorker(QThread):  # pragma: no cover - thread entry point
    def __init__(self, operation: "ConfigOperation"):
        super().__init__()
        self._operation = operation

    def run(self) -> None:  # type: ignore[override]
        self._operation._execute()


class ConfigOperation(QObject):
    """Base class holding the lifecycle shared by load and save."""

    started = pyqtSignal()
    progress = pyqtSignal(str, dict)  # (event, payload)
    succeeded = pyqtSignal(object)  # Config
    failed = pyqtSignal(object)  # ConfigError
    finished = pyqtSignal(object)  # OperationResult

    name = "operation"

    def __init__(self, store: "ConfigStore"):
        super().__init__()
        self._store = store
        self._lock = threading.Lock()
        self._state = OperationState.IDLE
        self._result: Optional[OperationResult] = None
        self._worker: Optional[_OperationWorker] = None

    # State ------------------------------------------------------------
    @property
    def state(self) -> OperationState:
        with self._lock:
            return self._state

    @property
    def result(self) -> Optional[OperationResult]:
        with self._lock:
            return self._result

    @property
    def error(self) -> Optional[ConfigError]:
        result = self.result
        return result.error if result else None

    def is_running(self) -> bool:
        return self.state is OperationState.RUNNING

    # Control ----------------------------------------------------------
    def start(self) -> bool:
        """Run the task in the background; ``False`` if already running."""
        with self._lock:
            if self._state is OperationState.RUNNING:
                logger.warning("Config %s already running; start request rejected", self.name)
                return False
            if self._worker is not None:
                # Previous thread has recorded its result; let it exit fully.
                self._worker.wait()
            self._state = OperationState.RUNNING
            self._result = None
            worker = _OperationWorker(self)
            self._worker = worker
        self.started.emit()
        worker.start()
        return True

    def reset(self) -> bool:
        """Re-arm a completed operation to ``IDLE``; ``False`` while running."""
        with self._lock:
            if self._state is OperationState.RUNNING:
                return False
            self._state = OperationState.IDLE
            self._result = None
            return True

    def wait(self, timeout_ms: Optional[int] = None) -> bool:
        """Block until the current run finished. Intended for shutdown and tests."""
        worker = self._worker
        if worker is None:
            return True
        if timeout_ms is None:
            return worker.wait()
        return worker.wait(timeout_ms)

    # Execution (worker thread) ----------------------------------------
    def _execute(self) -> None:
        try:
            config = self._run_task()
        except ConfigError as exc:
            result = OperationResult(OperationState.FAILED, error=exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Config %s failed unexpectedly", self.name)
            error = ConfigError(f"Config {self.name} failed: {exc}")
            error.__cause__ = exc
            result = OperationResult(OperationState.FAILED, error=error)
        else:
            result = OperationResult(OperationState.SUCCEEDED, config=config)

        with self._lock:
            self._state = result.state
            self._result = result

        if result.ok:
            self.succeeded.emit(result.config)
        else:
            self.failed.emit(result.error)
        self.finished.emit(result)

    def _report(self, event: str, **payload: Any) -> None:
        self.progress.emit(event, payload)

    def _run_task(self) -> Config:
        raise NotImplementedError


class ConfigReader(ConfigOperation):
    """Reads ``config.json`` and installs the decoded snapshot."""

    name = "load"

    def _run_task(self) -> Config:
        store = self._store
        path = store.storage_location()
        self._report("read", path=str(path))
        logger.debug("Reading config from %s", path)
        try:
            text = filesystem.read_text(path)
        except FileNotFoundError as exc:
            logger.info("No config file at %s; keeping defaults", path)
            raise ConfigFileNotFoundError(path) from exc
        except OSError as exc:
            logger.warning("Cannot read config file %s: %s", path, exc)
            raise ConfigReadError(path, exc) from exc

        self._report("decode", path=str(path), size=len(text))
        try:
            config = store.codec.decode(text)
        except ConfigError as exc:
            logger.warning("Ignoring malformed config file %s: %s", path, exc)
            raise
        store.install_snapshot(config)
        self._report("installed", path=str(path))
        logger.info("Loaded config from %s", path)
        return config


class ConfigWriter(ConfigOperation):
    """Writes the store's current snapshot to ``config.json``."""

    name = "save"

    def _run_task(self) -> Config:
        store = self._store
        config = store.current_snapshot()
        path = store.storage_location()
        self._report("encode", path=str(path))
        text = store.codec.encode(config)
        self._report("write", path=str(path), size=len(text))
        logger.debug("Writing config to %s", path)
        try:
            filesystem.write_text_atomic(path, text)
        except OSError as exc:
            logger.error("Cannot write config file %s: %s", path, exc)
            raise WriteFailedError(path, exc) from exc
        self._report("written", path=str(path))
        logger.info("Saved config to %s", path)
        return config
