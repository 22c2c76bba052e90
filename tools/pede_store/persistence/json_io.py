"""JSON and JSON5 file I/O with atomic writes.

This module handles reading and writing data documents:
- Supports both .json and .json5 extensions (JSON5 via the json5 package)
- Uses atomic write pattern (write temp file, then rename)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import json5

from pede_store.errors import InvalidJsonError

logger = logging.getLogger(__name__)


def parse_content_file(path: Path) -> Any:
    """Parse a JSON or JSON5 data document.

    Args:
        path: Path to the document (.json or .json5)

    Returns:
        Parsed Python object (typically a dict)

    Raises:
        InvalidJsonError: If parsing fails or the extension is unsupported
        FileNotFoundError: If file doesn't exist

    Behavior:
        - .json files are parsed with the standard json module
        - .json5 files are parsed with json5, which accepts comments,
          trailing commas and unquoted keys left by hand edits
    """
    raw = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidJsonError(str(path), str(exc)) from exc

    if path.suffix == ".json5":
        try:
            return json5.loads(raw)
        except ValueError as exc:
            raise InvalidJsonError(str(path), str(exc)) from exc

    raise InvalidJsonError(str(path), f"Unsupported file extension: {path.suffix}")


def write_content_file(path: Path, payload: Any) -> None:
    """Write content to a file atomically.

    Uses a write-then-rename pattern to ensure file integrity:
    1. Write to a temporary file (path.tmp)
    2. Rename temp file to target path

    Args:
        path: Target file path
        payload: Python object to serialize as JSON

    Invariants:
        - Parent directories are created if they don't exist
        - File is always valid JSON after write completes
        - Original file is not corrupted if write fails partway

    Note:
        Output is always JSON, even if the document was read as .json5.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(f"{path.suffix}.tmp")
    serialized = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    temp_path.write_text(serialized, encoding="utf-8")
    temp_path.replace(path)
    logger.debug("Wrote %d bytes to %s", len(serialized), path)
