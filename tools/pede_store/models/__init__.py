"""Domain models for typed record persistence.

This module exports all model types used across the package:
- Record and the namespace/type-kind discriminants
- Lookup results (Found / NotFound)
- Marker types for fixed-width primitives
"""

from pede_store.models.common import Namespace, TypeKind
from pede_store.models.lookup import Found, LookupResult, NotFound, is_found, unwrap_or
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
from pede_store.models.record import Record

__all__ = [
    # Common
    "Namespace",
    "TypeKind",
    # Record
    "Record",
    # Lookup
    "Found",
    "NotFound",
    "LookupResult",
    "is_found",
    "unwrap_or",
    # Primitives
    "Char",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "NInt",
    "NUInt",
    "Single",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
