from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from pede_store.errors import ArgumentNullError, DecodeError, EncodeError
from pede_store.models import (
    Char,
    Found,
    Namespace,
    NInt,
    NotFound,
    Record,
    UInt16,
    is_found,
    unwrap_or,
)
from pede_store.persistence import RecordStore


@dataclass
class Inventory:
    owner: str
    items: list[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Round trip and overwrite
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "type_, value",
    [
        (int, 5),
        (str, "five"),
        (bool, False),
        (float, 1.5),
        (Decimal, Decimal("2.50")),
        (UInt16, 65535),
        (Char, "z"),
        (NInt, -7),
        (dict, {"a": [1, 2]}),
        (Inventory, Inventory("ana", ["sword", "torch"])),
    ],
)
def test_set_then_get_returns_equal_value(prefs_store, type_, value):
    prefs_store.set(type_, "k", value)

    result = prefs_store.get(type_, "k")

    assert result == Found(value)


def test_set_existing_key_replaces_value_in_place(prefs_store):
    prefs_store.set(int, "a", 0)
    prefs_store.set(int, "k", 1)
    prefs_store.set(int, "b", 0)
    index = prefs_store.find_index(int, "k")

    prefs_store.set(int, "k", 2)

    assert prefs_store.find_index(int, "k") == index == 1
    assert len(prefs_store) == 3
    assert prefs_store.records()[1] == Record("k", "int", "2")


def test_same_key_under_different_types_coexists(prefs_store):
    prefs_store.set(int, "k", 5)
    prefs_store.set(str, "k", "five")

    assert len(prefs_store) == 2

    prefs_store.delete(int, "k")

    assert not prefs_store.has_key(int, "k")
    assert prefs_store.get(str, "k") == Found("five")


def test_generic_types_with_different_arguments_coexist(prefs_store):
    prefs_store.set(list[int], "k", [1, 2])
    prefs_store.set(list[str], "k", ["a"])
    prefs_store.set(dict, "k", {"a": 1})

    assert len(prefs_store) == 3
    assert prefs_store.get(list[int], "k") == Found([1, 2])
    assert prefs_store.get(list[str], "k") == Found(["a"])
    assert not prefs_store.has_key(dict[str, str], "k")


# -----------------------------------------------------------------------------
# Lookup results and callbacks
# -----------------------------------------------------------------------------

def test_get_missing_returns_not_found(prefs_store):
    assert prefs_store.get(int, "missing") == NotFound()
    assert not is_found(prefs_store.get(int, "missing"))
    assert unwrap_or(prefs_store.get(int, "missing"), 3) == 3


def test_is_found_on_match(prefs_store):
    prefs_store.set(int, "k", 4)

    result = prefs_store.get(int, "k")

    assert is_found(result)
    assert result.value == 4


def test_fetch_missing_calls_not_found_once(prefs_store):
    on_found = MagicMock()
    on_not_found = MagicMock()

    prefs_store.fetch(int, "missing", on_found, on_not_found)

    on_not_found.assert_called_once_with()
    on_found.assert_not_called()


def test_fetch_missing_without_not_found_callback_does_nothing(prefs_store, sink):
    on_found = MagicMock()

    prefs_store.fetch(int, "missing", on_found)

    on_found.assert_not_called()
    sink.persist.assert_not_called()


def test_fetch_delete_after_removes_record(prefs_store):
    prefs_store.set(str, "k", "v")
    on_found = MagicMock()
    on_not_found = MagicMock()

    prefs_store.fetch(str, "k", on_found, on_not_found, delete_after=True)

    on_found.assert_called_once_with("v")
    on_not_found.assert_not_called()
    assert prefs_store.get(str, "k") == NotFound()


def test_get_delete_after_returns_value_and_removes_record(prefs_store, sink):
    prefs_store.set(int, "k", 9)
    sink.reset_mock()

    assert prefs_store.get(int, "k", delete_after=True) == Found(9)

    assert len(prefs_store) == 0
    sink.persist.assert_called_once_with()


def test_get_on_incompatible_value_raises_decode_error(make_store):
    store = make_store([("k", "int", "abc")])

    with pytest.raises(DecodeError):
        store.get(int, "k")


def test_get_delete_after_keeps_record_when_decode_fails(make_store):
    sink = MagicMock()
    store = make_store([("k", "int", "abc")], sink=sink)

    with pytest.raises(DecodeError):
        store.get(int, "k", delete_after=True)

    assert len(store) == 1
    sink.persist.assert_not_called()


# -----------------------------------------------------------------------------
# Delete
# -----------------------------------------------------------------------------

def test_delete_removes_every_match(make_store):
    store = make_store([("k", "int", "1"), ("x", "int", "0"), ("k", "int", "2")])

    store.delete(int, "k")

    assert store.records() == [Record("x", "int", "0")]


def test_delete_all_clears_store(prefs_store):
    prefs_store.set(int, "a", 1)
    prefs_store.set(str, "b", "x")

    prefs_store.delete_all()

    assert len(prefs_store) == 0
    assert not prefs_store.has_key(int, "a")
    assert not prefs_store.has_key(str, "b")


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------

def test_every_mutation_persists_exactly_once(prefs_store, sink):
    prefs_store.set(int, "k", 1)
    assert sink.persist.call_count == 1

    prefs_store.set(int, "k", 2)
    assert sink.persist.call_count == 2

    prefs_store.delete(int, "k")
    assert sink.persist.call_count == 3

    prefs_store.delete_all()
    assert sink.persist.call_count == 4


def test_reads_never_persist(prefs_store, sink):
    prefs_store.set(int, "k", 1)
    sink.reset_mock()

    prefs_store.get(int, "k")
    prefs_store.has_key(int, "k")
    prefs_store.fetch(int, "k", MagicMock())
    prefs_store.records()

    sink.persist.assert_not_called()


def test_sink_failure_propagates(prefs_store, sink):
    sink.persist.side_effect = OSError("disk full")

    with pytest.raises(OSError):
        prefs_store.set(int, "k", 1)


def test_default_sink_keeps_state_in_memory():
    store = RecordStore(Namespace.FILE)

    store.set(int, "k", 1)

    assert store.get(int, "k") == Found(1)


# -----------------------------------------------------------------------------
# Argument checks
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "call",
    [
        lambda store: store.set(int, None, 1),
        lambda store: store.set(int, "k", None),
        lambda store: store.get(int, None),
        lambda store: store.fetch(int, None, MagicMock()),
        lambda store: store.fetch(int, "k", None),
        lambda store: store.delete(int, None),
        lambda store: store.has_key(int, None),
    ],
)
def test_null_arguments_raise_before_side_effects(prefs_store, sink, call):
    with pytest.raises(ArgumentNullError):
        call(prefs_store)

    assert len(prefs_store) == 0
    sink.persist.assert_not_called()


def test_argument_error_names_the_argument(prefs_store):
    with pytest.raises(ArgumentNullError) as excinfo:
        prefs_store.set(int, "k", None)

    assert excinfo.value.argument_name == "value"
    assert isinstance(excinfo.value, ValueError)


def test_encode_failure_leaves_store_untouched(prefs_store, sink):
    with pytest.raises(EncodeError):
        prefs_store.set(UInt16, "k", -1)

    assert len(prefs_store) == 0
    sink.persist.assert_not_called()


# -----------------------------------------------------------------------------
# Ownership
# -----------------------------------------------------------------------------

def test_records_returns_copies(prefs_store):
    prefs_store.set(int, "k", 1)
    snapshot = prefs_store.records()

    snapshot[0].value = "999"
    snapshot.clear()

    assert isinstance(snapshot, list)
    assert len(prefs_store) == 1
    assert prefs_store.get(int, "k") == Found(1)


def test_to_list_uses_document_field_names(prefs_store):
    prefs_store.set(bool, "muted", True)

    assert prefs_store.to_list() == [{"key": "muted", "type": "bool", "value": "True"}]
