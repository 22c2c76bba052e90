"""Typed record store for one namespace.

A RecordStore holds an ordered list of (key, type, value) records. Every
operation takes the Python type explicitly; its tag (see type_codec.type_name)
is part of the lookup key, so one key may hold distinct values under distinct
types at the same time:

    store.set(int, "level", 5)
    store.set(str, "level", "five")
    store.delete(int, "level")      # the str record survives

Mutations (set, delete, delete_all, and get with delete_after) call the
store's PersistenceSink exactly once before returning. Reads never do.

Arguments are checked before any lookup or side effect: a None key, value or
required callback raises ArgumentNullError.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional, TypeVar

from pede_store.errors import ArgumentNullError
from pede_store.models.common import Namespace
from pede_store.models.lookup import Found, LookupResult, NotFound, is_found
from pede_store.models.record import Record
from pede_store.persistence.sinks import NullSink, PersistenceSink
from pede_store.type_codec import decode, encode, type_name
from pede_store.validation.reporter import ErrorReporter
from pede_store.validation.rules import validate_records

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordStore:
    """Ordered, type-scoped record storage for one namespace.

    Invariants:
        - Replacing a record's value keeps its position
        - The sink runs once per mutating call and never on reads
        - Records are owned by this store only; records() returns copies

    Args:
        namespace: Which namespace this store holds
        sink: Durability collaborator (defaults to in-memory only)
        records: Initial records, e.g. loaded from a data document
    """

    def __init__(
        self,
        namespace: Namespace,
        sink: PersistenceSink | None = None,
        records: list[Record] | None = None,
    ) -> None:
        self.namespace = namespace
        self.sink: PersistenceSink = sink if sink is not None else NullSink()
        self._records: list[Record] = list(records or [])

    # -------------------------------------------------------------------------
    # Typed operations
    # -------------------------------------------------------------------------

    def set(self, type_: type[T], key: str, value: T) -> None:
        """Store value under (key, type_), replacing any existing value in place.

        Raises:
            ArgumentNullError: If key or value is None
            EncodeError: If value cannot be represented under type_
        """
        _require(key, "key")
        _require(value, "value")

        type_tag = type_name(type_)
        encoded = encode(type_, value)
        index = self._find_index(key, type_tag)

        if index is not None:
            self._records[index] = Record(key=key, type_tag=type_tag, value=encoded)
            logger.debug("Replaced %s[%d] %r (%s)", self.namespace.field_name, index, key, type_tag)
        else:
            self._records.append(Record(key=key, type_tag=type_tag, value=encoded))
            logger.debug("Added %s record %r (%s)", self.namespace.field_name, key, type_tag)

        self._persist()

    def get(self, type_: type[T], key: str, delete_after: bool = False) -> LookupResult[T]:
        """Look up and decode the value stored under (key, type_).

        Args:
            type_: Type to decode the value as
            key: Record key
            delete_after: Remove the record (and persist) after decoding it

        Returns:
            Found(value) on a match, NotFound otherwise

        Raises:
            ArgumentNullError: If key is None
            DecodeError: If the stored value does not parse as type_
        """
        _require(key, "key")

        type_tag = type_name(type_)
        index = self._find_index(key, type_tag)
        if index is None:
            return NotFound()

        value = decode(type_, self._records[index].value)
        if delete_after:
            self.delete(type_, key)
        return Found(value)

    def fetch(
        self,
        type_: type[T],
        key: str,
        on_found: Callable[[T], Any],
        on_not_found: Optional[Callable[[], Any]] = None,
        delete_after: bool = False,
    ) -> None:
        """Callback form of get().

        Invokes on_found with the decoded value, or on_not_found (if given)
        when nothing matches. With delete_after, the record is removed after
        on_found returns.

        Raises:
            ArgumentNullError: If key or on_found is None
            DecodeError: If the stored value does not parse as type_
        """
        _require(key, "key")
        _require(on_found, "on_found")

        result = self.get(type_, key)
        if is_found(result):
            on_found(result.value)
            if delete_after:
                self.delete(type_, key)
        elif on_not_found is not None:
            on_not_found()

    def delete(self, type_: type, key: str) -> None:
        """Remove every record stored under (key, type_).

        Raises:
            ArgumentNullError: If key is None
        """
        _require(key, "key")

        type_tag = type_name(type_)
        before = len(self._records)
        self._records = [record for record in self._records if not record.matches(key, type_tag)]
        logger.debug(
            "Deleted %d %s record(s) %r (%s)",
            before - len(self._records),
            self.namespace.field_name,
            key,
            type_tag,
        )
        self._persist()

    def delete_all(self) -> None:
        """Remove every record of this namespace."""
        self._records.clear()
        logger.debug("Cleared %s", self.namespace.field_name)
        self._persist()

    def has_key(self, type_: type, key: str) -> bool:
        """True if a record is stored under (key, type_).

        Raises:
            ArgumentNullError: If key is None
        """
        _require(key, "key")
        return self._find_index(key, type_name(type_)) is not None

    def find_index(self, type_: type, key: str) -> int | None:
        """Position of the record stored under (key, type_), if any."""
        _require(key, "key")
        return self._find_index(key, type_name(type_))

    # -------------------------------------------------------------------------
    # Inspection and validation
    # -------------------------------------------------------------------------

    def records(self) -> list[Record]:
        """Copies of the stored records, in order."""
        return [Record(record.key, record.type_tag, record.value) for record in self._records]

    def validate(self, reporter: ErrorReporter) -> bool:
        """Check every record against the key, type and value rules.

        Returns:
            True iff no violation was reported
        """
        return validate_records(self._records, reporter, self.namespace)

    def to_list(self) -> list[dict[str, Any]]:
        """Records as document entries."""
        return [record.to_dict() for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records())

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _find_index(self, key: str, type_tag: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.matches(key, type_tag):
                return index
        return None

    def _persist(self) -> None:
        self.sink.persist()


def _require(argument: Any, argument_name: str) -> None:
    if argument is None:
        raise ArgumentNullError(argument_name)
