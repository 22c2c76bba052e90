"""Data container holding both record namespaces.

PedeData owns a player-prefs store and a file store with disjoint records.
Both stores share one PersistenceSink; with open(), that sink rewrites the
JSON data document so every mutation is durable on return.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pede_store.config import SCHEMA_VERSION
from pede_store.errors import InvalidDocumentError
from pede_store.models.common import Namespace
from pede_store.models.record import Record
from pede_store.persistence.json_io import parse_content_file
from pede_store.persistence.record_store import RecordStore
from pede_store.persistence.sinks import JsonDocumentSink, PersistenceSink
from pede_store.validation.reporter import ErrorReporter

logger = logging.getLogger(__name__)


class PedeData:
    """Both record namespaces plus their shared persistence sink.

    Invariants:
        - player_prefs and files never share records
        - Both stores report to the same sink

    Args:
        sink: Durability collaborator for both stores (defaults to in-memory)
        player_prefs: Initial player-prefs records
        files: Initial file records
    """

    def __init__(
        self,
        sink: PersistenceSink | None = None,
        player_prefs: list[Record] | None = None,
        files: list[Record] | None = None,
    ) -> None:
        self.player_prefs = RecordStore(Namespace.PLAYER_PREFS, sink, player_prefs)
        self.files = RecordStore(Namespace.FILE, sink, files)

    def store(self, namespace: Namespace) -> RecordStore:
        """Store holding the given namespace."""
        if namespace is Namespace.FILE:
            return self.files
        return self.player_prefs

    def attach_sink(self, sink: PersistenceSink) -> None:
        """Route both stores' persistence to sink."""
        self.player_prefs.sink = sink
        self.files.sink = sink

    def delete_all(self) -> None:
        """Clear both namespaces (each store persists once)."""
        self.player_prefs.delete_all()
        self.files.delete_all()

    def validate_all(self, reporter: ErrorReporter) -> bool:
        """Validate both namespaces.

        Both stores are always validated, even when the first one fails.

        Returns:
            True iff neither store reported a violation
        """
        prefs_valid = self.player_prefs.validate(reporter)
        files_valid = self.files.validate(reporter)
        return prefs_valid and files_valid

    # -------------------------------------------------------------------------
    # Document conversion
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Full data document for JSON serialization."""
        return {
            "schemaVersion": SCHEMA_VERSION,
            Namespace.PLAYER_PREFS.field_name: self.player_prefs.to_list(),
            Namespace.FILE.field_name: self.files.to_list(),
        }

    @classmethod
    def from_dict(
        cls,
        document: dict[str, Any],
        sink: PersistenceSink | None = None,
        source: str = "<document>",
    ) -> "PedeData":
        """Build a container from a parsed data document.

        Malformed entries are kept (with empty fields) so validation can
        report them.

        Raises:
            InvalidDocumentError: If a namespace field is not an array
        """
        return cls(
            sink=sink,
            player_prefs=_records_from(document, Namespace.PLAYER_PREFS, source),
            files=_records_from(document, Namespace.FILE, source),
        )

    @classmethod
    def open(cls, path: Path) -> "PedeData":
        """Load a data document (if present) and persist back to it.

        Args:
            path: Document path; a missing file starts both stores empty

        Raises:
            InvalidJsonError: If the document is not valid JSON/JSON5
            InvalidDocumentError: If the document structure is unusable

        Note:
            A .json5 document is rewritten as JSON in place on first mutation.
        """
        if path.exists():
            document = parse_content_file(path)
            if not isinstance(document, dict):
                raise InvalidDocumentError(str(path), "root must be an object")
            version = document.get("schemaVersion", SCHEMA_VERSION)
            if version != SCHEMA_VERSION:
                raise InvalidDocumentError(
                    str(path), f"unsupported schemaVersion {version!r}, expected {SCHEMA_VERSION}"
                )
            data = cls.from_dict(document, source=str(path))
            logger.debug(
                "Loaded %s: %d prefs, %d files",
                path,
                len(data.player_prefs),
                len(data.files),
            )
        else:
            data = cls()
            logger.debug("No data document at %s, starting empty", path)

        data.attach_sink(JsonDocumentSink(path, data.to_dict))
        return data


def _records_from(document: dict[str, Any], namespace: Namespace, source: str) -> list[Record]:
    entries = document.get(namespace.field_name, [])
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise InvalidDocumentError(source, f"{namespace.field_name} must be an array")
    return [Record.from_dict(entry if isinstance(entry, dict) else {}) for entry in entries]
