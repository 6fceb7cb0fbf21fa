"""
JSON encode/decode helpers shared by Request and Response.

Structured values are plain JSON values, dataclasses and pydantic models
(handled through ``pydantic.TypeAdapter``), or objects that opt in through the
``JSONEncodable`` / ``JSONDecodable`` protocols.
"""
import dataclasses
import json
from typing import Any, Optional, Protocol, Type, TypeVar, runtime_checkable

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from .errors import DeserializationError, SerializationError

T = TypeVar("T")


@runtime_checkable
class JSONEncodable(Protocol):
    def to_json(self) -> Any:
        ...


@runtime_checkable
class JSONDecodable(Protocol):
    @classmethod
    def from_json(cls, data: Any) -> Any:
        ...


def _default(value: Any) -> Any:
    if isinstance(value, JSONEncodable):
        return value.to_json()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return TypeAdapter(type(value)).dump_python(value, mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """
    Serialize ``value`` to compact UTF-8 JSON bytes.

    Raises SerializationError for unsupported objects, circular references and
    non-finite floats.
    """
    try:
        text = json.dumps(value, default=_default, separators=(",", ":"), allow_nan=False, ensure_ascii=False)
        return text.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Failed to encode JSON: {exc}") from exc


def _parse(data: bytes) -> Any:
    try:
        return json.loads(data)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DeserializationError(f"Failed to parse JSON: {exc}") from exc


def decode_json(data: bytes, type_: Optional[Type[T]] = None) -> Any:
    """
    Parse ``data`` as JSON and, when ``type_`` is given, validate it as that type.

    Validation is strict: JSON strings are not coerced to numbers, nor booleans
    to integers. Unknown object keys are ignored. Raises DeserializationError
    if the bytes are not JSON, the value does not fit ``type_``, or ``type_``
    cannot be resolved.
    """
    if type_ is None:
        return _parse(data)
    name = getattr(type_, "__name__", repr(type_))
    if isinstance(type_, JSONDecodable):
        raw = _parse(data)
        try:
            return type_.from_json(raw)
        except (TypeError, ValueError, KeyError) as exc:
            raise DeserializationError(f"JSON does not match {name}: {exc}") from exc
    try:
        return TypeAdapter(type_).validate_json(data, strict=True)
    except ValidationError as exc:
        raise DeserializationError(f"JSON does not match {name}: {exc}") from exc
    except (PydanticUserError, NameError) as exc:
        # Unresolvable forward references and types pydantic cannot build a schema for.
        raise DeserializationError(f"Cannot decode into {name}: {exc}") from exc


__all__ = [
    "JSONEncodable",
    "JSONDecodable",
    "encode_json",
    "decode_json",
]
