"""Common types shared across record models.

This module defines the closed discriminants used by the store and codec.
"""

from __future__ import annotations

from enum import Enum

from pede_store.config import FILE_FIELD, PLAYER_PREFS_FIELD


# -----------------------------------------------------------------------------
# Namespace
# -----------------------------------------------------------------------------

class Namespace(Enum):
    """One of the two independent record stores."""
    PLAYER_PREFS = PLAYER_PREFS_FIELD
    FILE = FILE_FIELD

    @property
    def is_file(self) -> bool:
        """True for the file-backed namespace."""
        return self is Namespace.FILE

    @property
    def field_name(self) -> str:
        """Document field holding this namespace's records."""
        return self.value


# -----------------------------------------------------------------------------
# Type Kind
# -----------------------------------------------------------------------------

class TypeKind(Enum):
    """Encoding strategy selected for a type.

    PRIMITIVE and POINTER values are stored as direct string conversions;
    STRUCTURED values are stored as JSON of their public fields.
    """
    PRIMITIVE = "primitive"
    POINTER = "pointer"
    STRUCTURED = "structured"
