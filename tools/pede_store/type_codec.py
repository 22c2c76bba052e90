"""Typed value <-> string conversion for stored records.

Every record value is stored as a string. The requested Python type selects one
of three strategies (see TypeKind):

- PRIMITIVE: bool, int, float, str, Decimal and the marker types in
  models/primitives.py are converted directly to a locale-invariant string.
- POINTER: NInt / NUInt are stored as decimal strings and read back with
  32-bit range semantics. Values outside that range can be written but not
  read; this mirrors data written by earlier versions and is not corrected
  silently.
- STRUCTURED: anything else is stored as indented JSON of its public fields.

Callers always supply the type explicitly. The stored type tag is only used for
lookup and validation; decode_tag() is the tag-driven path used by validation.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import types
import typing
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from pede_store.config import INTEGER_RANGES, POINTER_TAGS, PRIMITIVE_TAGS, STRUCTURED_JSON_INDENT
from pede_store.errors import DecodeError, EncodeError, UnknownTypeTagError
from pede_store.models.common import TypeKind
from pede_store.models.primitives import (
    Char,
    Int8,
    Int16,
    Int32,
    Int64,
    NInt,
    NUInt,
    Single,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# -----------------------------------------------------------------------------
# Type Tags
# -----------------------------------------------------------------------------

_SCALAR_TAGS: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
    Decimal: "decimal",
    Char: "char",
    Single: "single",
    Int8: "int8",
    UInt8: "uint8",
    Int16: "int16",
    UInt16: "uint16",
    Int32: "int32",
    UInt32: "uint32",
    Int64: "int64",
    UInt64: "uint64",
    NInt: "nint",
    NUInt: "nuint",
}

_TAG_TYPES: dict[str, type] = {tag: type_ for type_, tag in _SCALAR_TAGS.items()}


def type_name(type_: Any) -> str:
    """Canonical type tag for a Python type.

    Args:
        type_: The type a value is stored or requested as

    Returns:
        Registered short tag for primitive and pointer types, the bare
        qualified name for builtins (e.g. "dict"), otherwise "module.QualName".
        Parameterized generics keep their arguments, so list[int] and
        list[str] get distinct tags.

    Example:
        >>> type_name(int)
        'int'
        >>> type_name(UInt8)
        'uint8'
        >>> type_name(dict[str, int])
        'dict[str,int]'
    """
    tag = _SCALAR_TAGS.get(type_)
    if tag is not None:
        return tag
    origin = typing.get_origin(type_)
    if origin is not None:
        args = ",".join(type_name(arg) for arg in typing.get_args(type_))
        return f"{type_name(origin)}[{args}]"
    module = getattr(type_, "__module__", "builtins")
    qualname = getattr(type_, "__qualname__", None) or repr(type_)
    if module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def tag_kind(type_tag: str) -> TypeKind:
    """Encoding strategy for a stored type tag."""
    if type_tag in POINTER_TAGS:
        return TypeKind.POINTER
    if type_tag in PRIMITIVE_TAGS:
        return TypeKind.PRIMITIVE
    return TypeKind.STRUCTURED


def type_kind(type_: Any) -> TypeKind:
    """Encoding strategy for a Python type."""
    return tag_kind(type_name(type_))


def resolve_tag(type_tag: str) -> type:
    """Python type registered for a primitive or pointer tag.

    Raises:
        UnknownTypeTagError: If the tag names a structured type
    """
    try:
        return _TAG_TYPES[type_tag]
    except KeyError:
        raise UnknownTypeTagError(type_tag) from None


# -----------------------------------------------------------------------------
# Encode
# -----------------------------------------------------------------------------

def encode(type_: Any, value: Any) -> str:
    """Encode value as the string stored for type_.

    Raises:
        EncodeError: If value cannot be represented under type_
    """
    tag = type_name(type_)
    kind = tag_kind(tag)
    if kind is TypeKind.PRIMITIVE:
        return _encode_scalar(tag, value)
    if kind is TypeKind.POINTER:
        return _encode_pointer(tag, value)
    if kind is TypeKind.STRUCTURED:
        return _encode_structured(type_, tag, value)
    raise AssertionError(f"unhandled type kind {kind}")


def _encode_scalar(tag: str, value: Any) -> str:
    if tag == "bool":
        if not isinstance(value, bool):
            raise EncodeError(tag, f"expected bool, got {type(value).__name__}")
        return "True" if value else "False"

    if tag in ("str", "char"):
        if not isinstance(value, str):
            raise EncodeError(tag, f"expected str, got {type(value).__name__}")
        if tag == "char" and len(value) != 1:
            raise EncodeError(tag, f"expected a single character, got {len(value)}")
        return str(value)

    if tag in ("float", "single"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodeError(tag, f"expected float, got {type(value).__name__}")
        return repr(float(value))

    if tag == "decimal":
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            raise EncodeError(tag, f"expected Decimal, got {type(value).__name__}")
        return str(Decimal(value))

    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(tag, f"expected int, got {type(value).__name__}")
    bounds = INTEGER_RANGES.get(tag)
    if bounds is not None and not bounds[0] <= value <= bounds[1]:
        raise EncodeError(tag, f"{value} outside [{bounds[0]}, {bounds[1]}]")
    return str(int(value))


def _encode_pointer(tag: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(tag, f"expected int, got {type(value).__name__}")
    low, high = INTEGER_RANGES[tag]
    if not low <= value <= high:
        logger.warning(
            "Value %d stored as '%s' exceeds the 32-bit range and cannot be read back",
            value,
            tag,
        )
    return str(int(value))


def _encode_structured(type_: Any, tag: str, value: Any) -> str:
    expected = typing.get_origin(type_) or type_
    if isinstance(expected, type) and not isinstance(value, expected):
        raise EncodeError(tag, f"expected {expected.__name__}, got {type(value).__name__}")
    payload = _to_plain(value)
    if not isinstance(payload, (dict, list)):
        raise EncodeError(tag, "structured values must serialize to a JSON object or array")
    try:
        return json.dumps(payload, indent=STRUCTURED_JSON_INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise EncodeError(tag, str(exc)) from exc


def _to_plain(value: Any) -> Any:
    """Reduce a value to JSON-compatible data made of its public fields."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_plain(getattr(value, field.name))
            for field in dataclasses.fields(value)
            if not field.name.startswith("_")
        }
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, dict):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if hasattr(value, "__dict__"):
        return {
            name: _to_plain(item)
            for name, item in vars(value).items()
            if not name.startswith("_")
        }
    # Left for json.dumps to reject.
    return value


# -----------------------------------------------------------------------------
# Decode
# -----------------------------------------------------------------------------

def decode(type_: Any, text: str) -> Any:
    """Decode a stored string as type_.

    Raises:
        DecodeError: If text does not parse as type_
    """
    tag = type_name(type_)
    kind = tag_kind(tag)
    if kind is TypeKind.PRIMITIVE or kind is TypeKind.POINTER:
        parsed = _decode_scalar(tag, text)
        if type_ is bool or type(parsed) is type_:
            return parsed
        return type_(parsed)
    if kind is TypeKind.STRUCTURED:
        payload = _parse_json(tag, text)
        try:
            return _build(type_, payload)
        except (TypeError, ValueError, KeyError, InvalidOperation) as exc:
            raise DecodeError(tag, text, str(exc)) from exc
    raise AssertionError(f"unhandled type kind {kind}")


def decode_tag(type_tag: str, text: str) -> Any:
    """Decode a stored string using only its type tag.

    Primitive and pointer tags decode fully. Structured tags name arbitrary
    classes that may not be importable, so their payload only has to be a
    JSON object or array.

    Raises:
        DecodeError: If text does not parse under type_tag
    """
    kind = tag_kind(type_tag)
    if kind is TypeKind.PRIMITIVE or kind is TypeKind.POINTER:
        return _decode_scalar(type_tag, text)
    if kind is TypeKind.STRUCTURED:
        payload = _parse_json(type_tag, text)
        if not isinstance(payload, (dict, list)):
            raise DecodeError(type_tag, text, "expected a JSON object or array")
        return payload
    raise AssertionError(f"unhandled type kind {kind}")


def _decode_scalar(tag: str, text: str) -> Any:
    if tag == "str":
        return text

    if tag == "char":
        if len(text) != 1:
            raise DecodeError(tag, text, "expected exactly one character")
        return text

    if tag == "bool":
        lowered = text.strip().lower()
        if lowered not in ("true", "false"):
            raise DecodeError(tag, text, "expected 'True' or 'False'")
        return lowered == "true"

    if tag in ("float", "single", "decimal") and not _is_invariant_number(text):
        raise DecodeError(tag, text, "not an invariant number")

    if tag in ("float", "single"):
        try:
            return float(text)
        except ValueError as exc:
            raise DecodeError(tag, text, str(exc)) from exc

    if tag == "decimal":
        try:
            return Decimal(text.strip())
        except InvalidOperation as exc:
            raise DecodeError(tag, text, "not a decimal number") from exc

    if not _INTEGER_PATTERN.match(text):
        raise DecodeError(tag, text, "not an integer")
    number = int(text)
    bounds = INTEGER_RANGES.get(tag)
    if bounds is not None and not bounds[0] <= number <= bounds[1]:
        raise DecodeError(tag, text, f"outside [{bounds[0]}, {bounds[1]}]")
    return number


def _is_invariant_number(text: str) -> bool:
    # float() and Decimal() also accept "_" separators and non-ASCII digits.
    return text.isascii() and "_" not in text


def _parse_json(tag: str, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(tag, text, str(exc)) from exc


def _build(type_: Any, payload: Any) -> Any:
    """Construct an instance of type_ from parsed JSON."""
    origin = typing.get_origin(type_) or type_

    if origin is list:
        if not isinstance(payload, list):
            raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
        args = typing.get_args(type_)
        return [_build_field(args[0], item) for item in payload] if args else payload

    if origin is dict:
        if not isinstance(payload, dict):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        return payload

    if not isinstance(payload, dict):
        raise TypeError(f"expected a JSON object, got {type(payload).__name__}")

    from_dict = getattr(type_, "from_dict", None)
    if callable(from_dict):
        return from_dict(payload)

    if dataclasses.is_dataclass(type_):
        hints = _field_hints(type_)
        kwargs = {
            field.name: _build_field(hints.get(field.name), payload[field.name])
            for field in dataclasses.fields(type_)
            if field.init and field.name in payload
        }
        return type_(**kwargs)

    # Plain classes: default-construct, then overwrite known public attributes.
    instance = type_()
    for name, item in payload.items():
        if not name.startswith("_") and hasattr(instance, name):
            setattr(instance, name, item)
    return instance


def _build_field(hint: Any, raw: Any) -> Any:
    if hint is None or raw is None:
        return raw

    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        options = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        return _build_field(options[0], raw) if len(options) == 1 else raw

    if origin is list and isinstance(raw, list):
        args = typing.get_args(hint)
        return [_build_field(args[0], item) for item in raw] if args else raw

    if isinstance(hint, type):
        if issubclass(hint, Enum):
            return hint(raw)
        if issubclass(hint, Decimal):
            return Decimal(str(raw))
        if isinstance(raw, dict) and (
            dataclasses.is_dataclass(hint) or callable(getattr(hint, "from_dict", None))
        ):
            return _build(hint, raw)
    return raw


def _field_hints(type_: Any) -> dict[str, Any]:
    """Resolved field annotations; empty when they reference unresolvable names."""
    try:
        return typing.get_type_hints(type_)
    except NameError:
        logger.debug("Unresolvable annotations on %s; nested fields stay raw", type_name(type_))
        return {}
