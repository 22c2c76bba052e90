"""Persistence layer for typed records.

This module exports file I/O and store components:
- JSON5/JSON parsing and atomic writes
- Data document path resolution
- Persistence sinks invoked after every mutation
- RecordStore (one namespace) and PedeData (both namespaces)
"""

from pede_store.persistence.data_paths import find_data_path, resolve_data_path
from pede_store.persistence.data_store import PedeData
from pede_store.persistence.json_io import parse_content_file, write_content_file
from pede_store.persistence.record_store import RecordStore
from pede_store.persistence.sinks import CallbackSink, JsonDocumentSink, NullSink, PersistenceSink

__all__ = [
    # JSON I/O
    "parse_content_file",
    "write_content_file",
    # Data Paths
    "find_data_path",
    "resolve_data_path",
    # Sinks
    "PersistenceSink",
    "NullSink",
    "CallbackSink",
    "JsonDocumentSink",
    # Stores
    "RecordStore",
    "PedeData",
]
