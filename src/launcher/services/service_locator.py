"""Application-root service registry.

Holds the long-lived objects the launcher shares between windows and
dialogs (the config store, the logging service). The bootstrap registers
them once; tests swap them with ``override_context``.

Usage pattern:
    from launcher.services.service_locator import services
    store = services.get_typed("config_store", ConfigStore)
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, Generator, Iterable, Type, TypeVar

T = TypeVar("T")

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when attempting to register an existing key without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested service key is not present."""


@dataclass
class ServiceRecord:
    key: str
    value: Any
    origin: str | None = None


class ServiceLocator:
    """Thread-safe service registry."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._services: Dict[str, ServiceRecord] = {}

    def register(
        self, key: str, value: Any, *, allow_override: bool = False, origin: str | None = None
    ) -> None:
        with self._lock:
            if key in self._services and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._services[key] = ServiceRecord(key=key, value=value, origin=origin)

    def get(self, key: str) -> Any:
        with self._lock:
            record = self._services.get(key)
            if record is None:
                raise ServiceNotFoundError(key)
            return record.value

    def get_typed(self, key: str, expected_type: Type[T]) -> T:
        value = self.get(key)
        if not isinstance(value, expected_type):
            raise TypeError(
                f"Service '{key}' expected type {expected_type!r} but got {type(value)!r}"
            )
        return value

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            record = self._services.get(key)
            return record.value if record else default

    @contextmanager
    def override_context(self, **overrides: Any) -> Generator[None, None, None]:
        """Temporarily replace services; previous values are restored on exit."""
        previous: Dict[str, ServiceRecord | None] = {}
        with self._lock:
            for key, new_value in overrides.items():
                previous[key] = self._services.get(key)
                self._services[key] = ServiceRecord(key=key, value=new_value, origin="override")
        try:
            yield
        finally:
            with self._lock:
                for key, prior in previous.items():
                    if prior is None:
                        self._services.pop(key, None)
                    else:
                        self._services[key] = prior

    def unregister(self, key: str) -> None:
        with self._lock:
            self._services.pop(key, None)

    def list_keys(self) -> Iterable[str]:
        with self._lock:
            return list(self._services.keys())

    def clear(self) -> None:
        with self._lock:
            self._services.clear()


services = ServiceLocator()
