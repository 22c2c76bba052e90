"""Validation layer for stored records.

This module exports validation components:
- The rule engine checking key, type and value rules per record
- Error reporters receiving violations as they are found
"""

from pede_store.validation.reporter import CollectingReporter, ErrorReporter, LoggingReporter
from pede_store.validation.rules import validate_records

__all__ = [
    # Rules
    "validate_records",
    # Reporters
    "ErrorReporter",
    "CollectingReporter",
    "LoggingReporter",
]
