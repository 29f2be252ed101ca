"""Type adapters for values JSON cannot represent natively.

An adapter is a small encode/decode strategy pair for one Python type. The
codec looks adapters up by the value's type (including base classes) when
encoding and by the declared field type when decoding. Decoding errors are
raised as the specific :mod:`launcher.config.errors` subclass for the type.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, TypeVar

from launcher.packages.reference import PackageReference
from launcher.util.os_info import OperatingSystem

from .errors import MalformedPackageReferenceError, MalformedPathError

__all__ = ["TypeAdapter", "PathAdapter", "PackageReferenceAdapter", "default_adapters"]

T = TypeVar("T")

_WINDOWS_INVALID_CHARS = set('<>"|?*')
_WINDOWS_PREFIX = re.compile(r"^(?:[A-Za-z]:|\\\\\?\\[A-Za-z]:|\\\\)")


class TypeAdapter(Protocol[T]):
    def encode(self, value: T) -> Any: ...

    def decode(self, raw: Any) -> T: ...


class PathAdapter:
    """Paths are stored as their native string form.

    Validation on decode follows the rules of ``operating_system`` (the host
    by default), so a file written on Windows with a drive letter still loads
    there while control characters are rejected.
    """

    def __init__(self, operating_system: Optional[OperatingSystem] = None):
        self.operating_system = operating_system or OperatingSystem.detect()

    def encode(self, value: os.PathLike) -> str:
        return os.fspath(value)

    def decode(self, raw: Any) -> Path:
        if not isinstance(raw, str):
            raise MalformedPathError(raw, "expected a string")
        if not raw.strip():
            raise MalformedPathError(raw, "path is empty")
        if "\x00" in raw:
            raise MalformedPathError(raw, "contains a NUL character")
        if self.operating_system.is_windows:
            self._check_windows(raw)
        return Path(raw)

    @staticmethod
    def _check_windows(raw: str) -> None:
        match = _WINDOWS_PREFIX.match(raw)
        rest = raw[match.end():] if match else raw
        for ch in rest:
            if ch in _WINDOWS_INVALID_CHARS or ord(ch) < 32:
                raise MalformedPathError(raw, f"invalid character {ch!r} for Windows")
        if ":" in rest:
            raise MalformedPathError(raw, "drive separator outside of the drive prefix")


class PackageReferenceAdapter:
    """Only ``id``, ``version`` and the optional ``name`` are persisted."""

    required = ("id", "version")

    def encode(self, value: PackageReference) -> Dict[str, str]:
        data = {"id": value.id, "version": value.version}
        if value.name is not None:
            data["name"] = value.name
        return data

    def decode(self, raw: Any) -> PackageReference:
        if not isinstance(raw, dict):
            raise MalformedPackageReferenceError(raw, "expected an object")
        for key in self.required:
            value = raw.get(key)
            if not isinstance(value, str) or not value:
                raise MalformedPackageReferenceError(raw, f"missing or invalid '{key}'")
        name = raw.get("name")
        if name is not None and not isinstance(name, str):
            raise MalformedPackageReferenceError(raw, "'name' must be a string")
        return PackageReference(id=raw["id"], version=raw["version"], name=name)


def default_adapters(operating_system: Optional[OperatingSystem] = None) -> Dict[type, Any]:
    return {
        Path: PathAdapter(operating_system),
        PackageReference: PackageReferenceAdapter(),
    }
