#!/usr/bin/env python3
"""CLI entry point for data document inspection.

This module provides the argument parser and main entry point that
wires together all commands from the commands package.

Usage:
    python -m pede_store validate
    python -m pede_store prefs list
    python -m pede_store files show save_slot --type int
    python -m pede_store prefs set volume 0.8 --type float
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pede_store.commands import (
    cmd_records_delete,
    cmd_records_delete_all,
    cmd_records_list,
    cmd_records_set,
    cmd_records_show,
    cmd_validate,
)
from pede_store.config import POINTER_TAGS, PRIMITIVE_TAGS
from pede_store.errors import PedeError
from pede_store.models.common import Namespace
from pede_store.persistence import resolve_data_path


def _configure_stdio_utf8() -> None:
    """Ensure non-ASCII record values can be printed on Windows terminals.

    Windows consoles may default to a code page that can't handle Unicode.
    This reconfigures stdout/stderr to use UTF-8 if possible.
    """
    stdout = getattr(sys, "stdout", None)
    stderr = getattr(sys, "stderr", None)
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
    if hasattr(stderr, "reconfigure"):
        stderr.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]


def _add_namespace_commands(
    subparsers: argparse._SubParsersAction,
    name: str,
    namespace: Namespace,
    label: str,
) -> None:
    """Register list/show/set/delete/delete-all under one namespace group."""
    group = subparsers.add_parser(name, help=f"{label} record operations.")
    group.set_defaults(namespace=namespace.value)
    group_sub = group.add_subparsers(dest=f"{name}_command", required=True)
    scalar_tags = sorted(PRIMITIVE_TAGS | POINTER_TAGS)

    # list
    records_list = group_sub.add_parser("list", help=f"List all {label} records.")
    records_list.set_defaults(handler=cmd_records_list)

    # show
    records_show = group_sub.add_parser("show", help="Show one decoded value.")
    records_show.add_argument("key", help="Record key.")
    records_show.add_argument(
        "--type",
        required=True,
        help="Type tag of the record (primitive tag or structured type name).",
    )
    records_show.set_defaults(handler=cmd_records_show)

    # set
    records_set = group_sub.add_parser("set", help="Store a primitive value.")
    records_set.add_argument("key", help="Record key.")
    records_set.add_argument("value", help="Value, parsed according to --type.")
    records_set.add_argument("--type", required=True, choices=scalar_tags, help="Type tag.")
    records_set.set_defaults(handler=cmd_records_set)

    # delete
    records_delete = group_sub.add_parser("delete", help="Delete one record.")
    records_delete.add_argument("key", help="Record key.")
    records_delete.add_argument("--type", required=True, choices=scalar_tags, help="Type tag.")
    records_delete.set_defaults(handler=cmd_records_delete)

    # delete-all
    records_delete_all = group_sub.add_parser(
        "delete-all",
        help=f"Delete every {label} record.",
    )
    records_delete_all.set_defaults(handler=cmd_records_delete_all)


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser with all subcommands.

    Returns:
        Configured ArgumentParser with subcommands for:
        - validate
        - delete-all
        - prefs (list, show, set, delete, delete-all)
        - files (list, show, set, delete, delete-all)
    """
    parser = argparse.ArgumentParser(
        description="Inspect and validate typed record data documents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pede-store validate
  pede-store prefs list
  pede-store prefs set volume 0.8 --type float
  pede-store files show save_slot --type int
  pede-store files delete save_slot --type int
  pede-store delete-all
""",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument(
        "--data-file",
        type=Path,
        help="Data document to operate on.",
    )
    location.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="Directory holding pede.data.json5 or pede.data.json (default: .).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------------------------------------------------
    # validate command
    # ---------------------------------------------------------------------
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check both namespaces for key, type and value violations.",
    )
    validate_parser.set_defaults(handler=cmd_validate)

    # ---------------------------------------------------------------------
    # delete-all command
    # ---------------------------------------------------------------------
    delete_all_parser = subparsers.add_parser(
        "delete-all",
        help="Delete every record of both namespaces.",
    )
    delete_all_parser.set_defaults(handler=cmd_records_delete_all)

    # ---------------------------------------------------------------------
    # namespace command groups
    # ---------------------------------------------------------------------
    _add_namespace_commands(subparsers, "prefs", Namespace.PLAYER_PREFS, "player-prefs")
    _add_namespace_commands(subparsers, "files", Namespace.FILE, "file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error or failed validation)

    Handles:
        - PedeError: User-facing error messages
        - OSError: Unreadable or unwritable data document
    """
    _configure_stdio_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data_path = args.data_file or resolve_data_path(args.data_dir)
        handler = getattr(args, "handler", None)
        if handler is None:
            parser.print_help()
            return 1
        return int(handler(data_path, args))
    except PedeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
