"""Marker types for fixed-width primitives.

Python has a single unbounded int and a single double-precision float. These
subclasses let callers name a narrower type explicitly, e.g.
``store.set(UInt8, "volume", 200)``, so the stored tag and the range checks
match that type. Values decoded under a marker type are returned as
instances of the marker class.
"""

from __future__ import annotations


class Int8(int):
    """Signed 8-bit integer."""


class UInt8(int):
    """Unsigned 8-bit integer."""


class Int16(int):
    """Signed 16-bit integer."""


class UInt16(int):
    """Unsigned 16-bit integer."""


class Int32(int):
    """Signed 32-bit integer."""


class UInt32(int):
    """Unsigned 32-bit integer."""


class Int64(int):
    """Signed 64-bit integer."""


class UInt64(int):
    """Unsigned 64-bit integer."""


class NInt(int):
    """Signed pointer-sized integer.

    Read back with 32-bit range semantics; see type_codec.py.
    """


class NUInt(int):
    """Unsigned pointer-sized integer.

    Read back with 32-bit range semantics; see type_codec.py.
    """


class Single(float):
    """Single-precision float tag. Stored with Python float precision."""


class Char(str):
    """Single character."""
