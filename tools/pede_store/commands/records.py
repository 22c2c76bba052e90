"""Record commands for one namespace.

This module provides the per-namespace CLI commands:
- list: Display all records with a value preview
- show: Display one decoded value
- set: Store a primitive value
- delete: Remove a record
- delete-all: Clear the namespace (or both namespaces)

The namespace is taken from args.namespace, set by the parser.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from pede_store.models.common import Namespace, TypeKind
from pede_store.models.lookup import is_found
from pede_store.persistence import PedeData
from pede_store.persistence.record_store import RecordStore
from pede_store.type_codec import decode, decode_tag, resolve_tag, tag_kind

_PREVIEW_WIDTH = 40


def _open_store(data_path: Path, args: argparse.Namespace) -> RecordStore:
    return PedeData.open(data_path).store(Namespace(args.namespace))


def _preview(value: str) -> str:
    flat = " ".join(value.split())
    if len(flat) <= _PREVIEW_WIDTH:
        return flat
    return flat[: _PREVIEW_WIDTH - 3] + "..."


def cmd_records_list(data_path: Path, args: argparse.Namespace) -> int:
    """List all records of a namespace.

    Displays each record with: index, key, type, value preview.
    """
    store = _open_store(data_path, args)

    if not len(store):
        print("No records found.")
        return 0

    for index, record in enumerate(store):
        key = record.key or "<empty-key>"
        type_tag = record.type_tag or "<empty-type>"
        print(f"{index:>4} | {key:24} | {type_tag:16} | {_preview(record.value)}")

    return 0


def cmd_records_show(data_path: Path, args: argparse.Namespace) -> int:
    """Show one record's decoded value.

    Primitive and pointer tags are decoded to their Python value. Structured
    tags are printed as formatted JSON, since their class is not known here.

    Returns:
        0 if found, 1 if no record matches (key, type)
    """
    store = _open_store(data_path, args)

    if tag_kind(args.type) is TypeKind.STRUCTURED:
        for record in store:
            if record.matches(args.key, args.type):
                payload = decode_tag(record.type_tag, record.value)
                print(json.dumps(payload, indent=2, ensure_ascii=False))
                return 0
        print(f"No {args.type} record '{args.key}'.")
        return 1

    result = store.get(resolve_tag(args.type), args.key)
    if is_found(result):
        print(result.value)
        return 0
    print(f"No {args.type} record '{args.key}'.")
    return 1


def cmd_records_set(data_path: Path, args: argparse.Namespace) -> int:
    """Store a primitive or pointer value parsed from the command line.

    Raises:
        UnknownTypeTagError: If --type names a structured type
        DecodeError: If the value does not parse under --type
    """
    type_ = resolve_tag(args.type)
    store = _open_store(data_path, args)
    store.set(type_, args.key, decode(type_, args.value))
    print(f"Set {args.type} record '{args.key}'.")
    return 0


def cmd_records_delete(data_path: Path, args: argparse.Namespace) -> int:
    """Delete the record stored under (key, type).

    Raises:
        UnknownTypeTagError: If --type names a structured type
    """
    type_ = resolve_tag(args.type)
    store = _open_store(data_path, args)

    if not store.has_key(type_, args.key):
        print(f"No {args.type} record '{args.key}'.")
        return 1

    store.delete(type_, args.key)
    print(f"Deleted {args.type} record '{args.key}'.")
    return 0


def cmd_records_delete_all(data_path: Path, args: argparse.Namespace) -> int:
    """Clear one namespace, or both when no namespace was selected."""
    data = PedeData.open(data_path)
    namespace = getattr(args, "namespace", None)

    if namespace is None:
        data.delete_all()
        print("Deleted all records.")
    else:
        data.store(Namespace(namespace)).delete_all()
        print(f"Deleted all {namespace} records.")
    return 0

