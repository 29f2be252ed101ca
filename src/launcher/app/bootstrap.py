"""Launcher bootstrap: wires the config store and shared services.

Responsibilities:
 - Attach the in-process logging capture (optional)
 - Obtain the process-wide :class:`ConfigStore` (or an injected one for tests)
 - Register both in the service locator for windows and dialogs
 - Kick off the initial background load of ``config.json``

No ``QApplication`` is created here; the host owns its event loop and only
observes the reader's signals.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from launcher.config.store import ConfigStore
from launcher.services.logging_service import LoggingService
from launcher.services.service_locator import ServiceLocator, services

__all__ = ["AppContext", "create_app", "get_config_store", "shutdown"]

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    store: The config store the application reads its settings from.
    services: Service locator the store and logging service are registered in.
    logging_service: Ring-buffer log capture (None when not attached).
    load_started: Whether the initial background load was started.
    duration_s: Elapsed seconds for bootstrap.
    """

    store: ConfigStore
    services: ServiceLocator
    logging_service: Optional[LoggingService]
    load_started: bool
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)


def create_app(
    *,
    launcher_dir: Path | str | None = None,
    load_config: bool = True,
    attach_logging: bool = True,
    locator: ServiceLocator | None = None,
) -> AppContext:
    """Create the launcher application context.

    Parameters
    ----------
    launcher_dir: Explicit storage root. When None the shared, OS-resolved
        store from :meth:`ConfigStore.get_or_create` is used.
    load_config: Start the background load of ``config.json``.
    attach_logging: Attach a :class:`LoggingService` to the root logger.
    locator: Registry to use instead of the global ``services``.
    """
    started = time.perf_counter()
    registry = locator if locator is not None else services

    logging_service: Optional[LoggingService] = None
    if attach_logging:
        logging_service = registry.try_get("logging_service")
        if not isinstance(logging_service, LoggingService):
            logging_service = LoggingService()
            registry.register("logging_service", logging_service, allow_override=True)
        logging_service.attach_root()

    if launcher_dir is None:
        store = ConfigStore.get_or_create()
    else:
        store = ConfigStore(launcher_dir)
    registry.register("config_store", store, allow_override=True, origin=__name__)

    load_started = store.reader.start() if load_config else False

    duration = time.perf_counter() - started
    logger.info(
        "Launcher bootstrap complete in %.1f ms (config: %s)",
        duration * 1000.0,
        store.storage_location(),
    )
    return AppContext(
        store=store,
        services=registry,
        logging_service=logging_service,
        load_started=load_started,
        duration_s=duration,
        metadata={"startup_error": store.startup_error},
    )


def get_config_store(locator: ServiceLocator | None = None) -> ConfigStore:
    registry = locator if locator is not None else services
    return registry.get_typed("config_store", ConfigStore)


def shutdown(ctx: AppContext, *, timeout_ms: int = 5000) -> bool:
    """Wait for in-flight load/save runs and detach logging.

    Returns False if an operation did not finish within ``timeout_ms``.
    """
    finished = ctx.store.reader.wait(timeout_ms) and ctx.store.writer.wait(timeout_ms)
    if not finished:
        logger.warning("Config operations still running at shutdown")
    if ctx.logging_service is not None:
        ctx.logging_service.detach_root()
    return finished
