"""Validate command for data documents.

This module provides the validate command that checks both namespaces for
key, type and value violations.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pede_store.persistence import PedeData
from pede_store.validation import LoggingReporter


def cmd_validate(data_path: Path, _args: argparse.Namespace) -> int:
    """Validate every record of the data document.

    Args:
        data_path: Data document to check
        _args: CLI arguments (unused)

    Returns:
        0 if validation passed, 1 if violations were found

    Output:
        On success: "OK: N prefs, M files"
        On failure: List of violations
    """
    data = PedeData.open(data_path)
    reporter = LoggingReporter()

    if not data.validate_all(reporter):
        print("Validation failed:")
        for violation in reporter.report.violations:
            print(f" - {violation}")
        return 1

    print(f"OK: {len(data.player_prefs)} prefs, {len(data.files)} files")
    return 0
