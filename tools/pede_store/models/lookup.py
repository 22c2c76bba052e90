"""Lookup results returned by RecordStore.get().

Found and NotFound form a discriminated union. Check with isinstance(), or use
is_found() as a type guard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeGuard, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A record matched; value is its decoded payload."""
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    """No record matched the requested (key, type)."""


LookupResult = Union[Found[T], NotFound]
"""Result of a typed lookup."""


def is_found(result: LookupResult[T]) -> TypeGuard[Found[T]]:
    """Type guard for successful lookups."""
    return isinstance(result, Found)


def unwrap_or(result: LookupResult[T], default: T) -> T:
    """Return the found value, or default when nothing matched."""
    if isinstance(result, Found):
        return result.value
    return default
