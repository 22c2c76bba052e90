"""Persistence sinks invoked after every store mutation.

A sink makes the current state durable. It is called synchronously, exactly
once per mutating call, and never after reads: when set(), delete() or
delete_all() returns, the sink has already finished (or raised).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Protocol

from pede_store.persistence.json_io import write_content_file

logger = logging.getLogger(__name__)


class PersistenceSink(Protocol):
    """Durability collaborator of a RecordStore."""

    def persist(self) -> None:
        """Make the current state durable before returning."""
        ...


class NullSink:
    """Sink that keeps state in memory only."""

    def persist(self) -> None:
        return None


class CallbackSink:
    """Sink that delegates to a host-supplied callable."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def persist(self) -> None:
        self._callback()


class JsonDocumentSink:
    """Sink that rewrites a JSON data document on every mutation.

    Args:
        path: Document to write
        snapshot: Returns the full document payload to serialize
    """

    def __init__(self, path: Path, snapshot: Callable[[], dict[str, Any]]) -> None:
        self.path = path
        self._snapshot = snapshot

    def persist(self) -> None:
        write_content_file(self.path, self._snapshot())
        logger.debug("Persisted data document %s", self.path)
