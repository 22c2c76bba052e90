from unittest.mock import MagicMock

import pytest

from pede_store.models import Namespace, Record
from pede_store.persistence import PedeData, RecordStore
from pede_store.validation import CollectingReporter


@pytest.fixture
def sink():
    """A mock persistence sink recording every persist() call."""
    return MagicMock()


@pytest.fixture
def prefs_store(sink):
    """An empty player-prefs store wired to the mock sink."""
    return RecordStore(Namespace.PLAYER_PREFS, sink)


@pytest.fixture
def file_store(sink):
    """An empty file store wired to the mock sink."""
    return RecordStore(Namespace.FILE, sink)


@pytest.fixture
def data(sink):
    """An empty two-namespace container wired to the mock sink."""
    return PedeData(sink=sink)


@pytest.fixture
def reporter():
    """A reporter collecting violations into a ValidationReport."""
    return CollectingReporter()


@pytest.fixture
def make_store():
    """Build a store pre-loaded with raw (key, type, value) triples."""

    def _make(triples, namespace=Namespace.PLAYER_PREFS, sink=None):
        records = [Record(key, type_tag, value) for key, type_tag, value in triples]
        return RecordStore(namespace, sink, records)

    return _make
