"""JSON codec for configuration snapshots.

The codec walks the snapshot dataclasses field by field. Nested dataclasses
become nested JSON objects, enums are stored by member name and types with a
registered :class:`~launcher.config.adapters.TypeAdapter` (paths, package
references) are delegated to it. Output is indented UTF-8 text without
``\\u`` escapes so the file stays readable and hand-editable.

Every decode failure surfaces as :class:`MalformedDocumentError` (or one of
its subclasses); callers never see a raw ``json`` or ``TypeError``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import types
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from launcher.util.os_info import OperatingSystem

from .adapters import TypeAdapter, default_adapters
from .errors import MalformedDocumentError
from .model import Config

__all__ = ["ConfigCodec"]

logger = logging.getLogger(__name__)

D = TypeVar("D")

_PRIMITIVES = (str, bool, int, float)


class ConfigCodec:
    def __init__(
        self,
        adapters: Optional[Mapping[type, TypeAdapter]] = None,
        *,
        operating_system: Optional[OperatingSystem] = None,
        indent: int = 2,
    ):
        self._adapters: Dict[type, TypeAdapter] = dict(default_adapters(operating_system))
        if adapters:
            self._adapters.update(adapters)
        self._indent = indent
        self._hints: Dict[type, Dict[str, Any]] = {}

    # Encoding ---------------------------------------------------------
    def encode(self, config: Config) -> str:
        payload = self._encode_value(config)
        return json.dumps(payload, indent=self._indent, ensure_ascii=False) + "\n"

    def _encode_value(self, value: Any) -> Any:
        if value is None or (isinstance(value, _PRIMITIVES) and not isinstance(value, Enum)):
            return value
        adapter = self._adapter_for(type(value))
        if adapter is not None:
            return adapter.encode(value)
        if isinstance(value, Enum):
            return value.name
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {
                f.name: self._encode_value(getattr(value, f.name))
                for f in dataclasses.fields(value)
            }
        raise TypeError(f"Cannot encode value of type {type(value).__name__}")

    def _adapter_for(self, tp: type) -> Optional[TypeAdapter]:
        for base in getattr(tp, "__mro__", (tp,)):
            adapter = self._adapters.get(base)
            if adapter is not None:
                return adapter
        return None

    # Decoding ---------------------------------------------------------
    def decode(self, text: str) -> Config:
        if text is None or not text.strip():
            raise MalformedDocumentError("Config document is empty")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(f"Config document is not valid JSON: {exc}") from exc
        return self._decode_dataclass(Config, data, "$")

    def _decode_dataclass(self, cls: Type[D], raw: Any, where: str) -> D:
        if not isinstance(raw, dict):
            raise MalformedDocumentError(f"{where}: expected an object")
        hints = self._type_hints(cls)
        values: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if f.name not in raw:
                if f.default is not dataclasses.MISSING:
                    values[f.name] = f.default
                    continue
                raise MalformedDocumentError(f"{where}.{f.name}: missing field")
            values[f.name] = self._decode_value(hints[f.name], raw[f.name], f"{where}.{f.name}")
        unknown = set(raw) - set(values)
        if unknown:
            logger.debug("Ignoring unknown keys at %s: %s", where, sorted(unknown))
        return cls(**values)

    def _decode_value(self, tp: Any, raw: Any, where: str) -> Any:
        origin = get_origin(tp)
        if origin is Union or origin is types.UnionType:
            members = [a for a in get_args(tp) if a is not type(None)]
            if raw is None:
                return None
            if len(members) != 1:
                raise MalformedDocumentError(f"{where}: unsupported union type {tp!r}")
            tp = members[0]

        adapter = self._adapter_for(tp)
        if adapter is not None:
            return adapter.decode(raw)
        if isinstance(tp, type) and issubclass(tp, Enum):
            if not isinstance(raw, str) or raw not in tp.__members__:
                raise MalformedDocumentError(f"{where}: unknown {tp.__name__} value {raw!r}")
            return tp[raw]
        if dataclasses.is_dataclass(tp):
            return self._decode_dataclass(tp, raw, where)
        if tp is bool:
            if not isinstance(raw, bool):
                raise MalformedDocumentError(f"{where}: expected a boolean")
            return raw
        if tp is int:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise MalformedDocumentError(f"{where}: expected an integer")
            return raw
        if tp is float:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise MalformedDocumentError(f"{where}: expected a number")
            return float(raw)
        if tp is str:
            if not isinstance(raw, str):
                raise MalformedDocumentError(f"{where}: expected a string")
            return raw
        raise MalformedDocumentError(f"{where}: unsupported field type {tp!r}")

    def _type_hints(self, cls: type) -> Dict[str, Any]:
        hints = self._hints.get(cls)
        if hints is None:
            hints = get_type_hints(cls)
            self._hints[cls] = hints
        return hints
