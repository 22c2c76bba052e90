"""Configuration constants for typed record persistence.

This module centralizes the document layout, file names and numeric ranges
used across the package. Adding a new primitive type tag requires updating
this file and the codec table in type_codec.py.
"""

from __future__ import annotations

from typing import Final, FrozenSet

# -----------------------------------------------------------------------------
# Data Document
# -----------------------------------------------------------------------------

SCHEMA_VERSION: Final[int] = 1
"""Current version of the persisted data document."""

PLAYER_PREFS_FIELD: Final[str] = "playerPrefData"
FILE_FIELD: Final[str] = "fileData"
"""Top-level document fields holding each namespace's records."""

DATA_BASENAME: Final[str] = "pede.data"
"""Base filename of the data document (without extension)."""

DATA_EXTENSIONS: Final[tuple[str, ...]] = (".json5", ".json")
"""Readable document extensions, in order of preference."""

STRUCTURED_JSON_INDENT: Final[int] = 4
"""Indentation used when serializing structured record values."""


# -----------------------------------------------------------------------------
# Primitive Type Tags
# -----------------------------------------------------------------------------

PRIMITIVE_TAGS: Final[FrozenSet[str]] = frozenset({
    "bool",
    "int",
    "float",
    "str",
    "decimal",
    "char",
    "single",
    "int8",
    "uint8",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
})
"""Type tags stored with a direct string conversion."""

POINTER_TAGS: Final[FrozenSet[str]] = frozenset({
    "nint",
    "nuint",
})
"""Pointer-sized integer tags, decoded with 32-bit range semantics."""


# -----------------------------------------------------------------------------
# Integer Ranges
# -----------------------------------------------------------------------------

INTEGER_RANGES: Final[dict[str, tuple[int, int]]] = {
    "int8": (-(2**7), 2**7 - 1),
    "uint8": (0, 2**8 - 1),
    "int16": (-(2**15), 2**15 - 1),
    "uint16": (0, 2**16 - 1),
    "int32": (-(2**31), 2**31 - 1),
    "uint32": (0, 2**32 - 1),
    "int64": (-(2**63), 2**63 - 1),
    "uint64": (0, 2**64 - 1),
    # Pointer-sized values are read back through 32-bit conversions.
    "nint": (-(2**31), 2**31 - 1),
    "nuint": (0, 2**32 - 1),
}
"""Inclusive (min, max) bounds for range-restricted integer tags."""
