"""Data document path resolution.

Locates the data document within a directory. Both .json5 and .json are
readable, with preference for .json5; new documents are created as .json.
"""

from __future__ import annotations

from pathlib import Path

from pede_store.config import DATA_BASENAME, DATA_EXTENSIONS


def find_data_path(directory: Path, basename: str = DATA_BASENAME) -> Path | None:
    """Find an existing data document.

    Args:
        directory: Directory expected to hold the document
        basename: Base filename without extension

    Returns:
        Path to the existing document, or None if not found
    """
    for extension in DATA_EXTENSIONS:
        candidate = directory / f"{basename}{extension}"
        if candidate.exists():
            return candidate
    return None


def resolve_data_path(directory: Path, basename: str = DATA_BASENAME) -> Path:
    """Resolve the data document path, existing or default.

    Args:
        directory: Directory expected to hold the document
        basename: Base filename without extension

    Returns:
        The existing .json5/.json document, or directory/basename.json
    """
    existing = find_data_path(directory, basename)
    if existing is not None:
        return existing
    return directory / f"{basename}.json"
