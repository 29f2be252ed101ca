"""Shared application services (registry, log capture)."""

from .service_locator import (  # noqa: F401
    ServiceLocator,
    services,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .logging_service import LogEntry, LoggingService, get_logging_service  # noqa: F401

__all__ = [
    "ServiceLocator",
    "services",
    "ServiceAlreadyRegisteredError",
    "ServiceNotFoundError",
    "LogEntry",
    "LoggingService",
    "get_logging_service",
]
