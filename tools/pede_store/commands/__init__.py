"""CLI commands for data document inspection.

This module exports all command handlers:
- validate: Document validation
- records: Per-namespace listing, lookup and mutation
"""

from pede_store.commands.records import (
    cmd_records_delete,
    cmd_records_delete_all,
    cmd_records_list,
    cmd_records_set,
    cmd_records_show,
)
from pede_store.commands.validate import cmd_validate

__all__ = [
    # Validate
    "cmd_validate",
    # Records
    "cmd_records_list",
    "cmd_records_show",
    "cmd_records_set",
    "cmd_records_delete",
    "cmd_records_delete_all",
]
