"""Domain model for a stored record.

A Record is one (key, type, value) triple of a namespace. Records loaded from
an externally edited document may be malformed; from_dict() coerces missing or
null fields to empty strings so validation can report them instead of the
loader failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Record:
    """Stored (key, type, value) triple.

    Invariants (when the store is valid):
        - key is non-empty and unique within its store
        - type_tag is non-empty
        - value decodes under type_tag
    """
    key: str
    type_tag: str
    value: str

    def matches(self, key: str, type_tag: str) -> bool:
        """True if this record is addressed by (key, type_tag)."""
        return self.key == key and self.type_tag == type_tag

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Record":
        """Create a Record from a raw document entry.

        Args:
            data: Dictionary with key/type/value fields

        Returns:
            Record instance; absent or null fields become ""
        """
        return cls(
            key=_text(data.get("key")),
            type_tag=_text(data.get("type")),
            value=_text(data.get("value")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "key": self.key,
            "type": self.type_tag,
            "value": self.value,
        }


def _text(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)
