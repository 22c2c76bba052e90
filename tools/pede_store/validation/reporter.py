"""Error reporters receiving validation violations.

An ErrorReporter bundles three callbacks that the validation engine invokes
synchronously, at the moment a violation is found. Reporters are purely
observational and must not modify the store being validated.
"""

from __future__ import annotations

import logging
from typing import Callable

from pede_store.errors import ValidationReport, ValidationViolation, ViolationKind

logger = logging.getLogger(__name__)

ValueErrorCallback = Callable[[str, int, bool], None]
KeyErrorCallback = Callable[[str, int, bool, bool], None]
TypeErrorCallback = Callable[[str, int, bool], None]


class ErrorReporter:
    """Caller-supplied sink for per-record violations.

    Args:
        on_value_error: (identifier, index, is_file_namespace)
        on_key_error: (identifier, index, is_file_namespace, is_duplicate)
        on_type_error: (identifier, index, is_file_namespace)
    """

    def __init__(
        self,
        on_value_error: ValueErrorCallback,
        on_key_error: KeyErrorCallback,
        on_type_error: TypeErrorCallback,
    ) -> None:
        self._on_value_error = on_value_error
        self._on_key_error = on_key_error
        self._on_type_error = on_type_error

    def value_error(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        self._on_value_error(identifier, index, is_file_namespace)

    def key_error(
        self,
        identifier: str,
        index: int,
        is_file_namespace: bool,
        is_duplicate: bool,
    ) -> None:
        self._on_key_error(identifier, index, is_file_namespace, is_duplicate)

    def type_error(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        self._on_type_error(identifier, index, is_file_namespace)


class CollectingReporter(ErrorReporter):
    """Reporter that records every violation into a ValidationReport."""

    def __init__(self) -> None:
        self.report = ValidationReport()
        super().__init__(
            on_value_error=self._collect_value,
            on_key_error=self._collect_key,
            on_type_error=self._collect_type,
        )

    def _collect_value(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        self.report.add(
            ValidationViolation(ViolationKind.VALUE, identifier, index, is_file_namespace)
        )

    def _collect_key(
        self,
        identifier: str,
        index: int,
        is_file_namespace: bool,
        is_duplicate: bool,
    ) -> None:
        self.report.add(
            ValidationViolation(
                ViolationKind.KEY, identifier, index, is_file_namespace, is_duplicate
            )
        )

    def _collect_type(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        self.report.add(
            ValidationViolation(ViolationKind.TYPE, identifier, index, is_file_namespace)
        )


class LoggingReporter(CollectingReporter):
    """Collecting reporter that also logs each violation at WARNING."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger
        super().__init__()

    def value_error(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        super().value_error(identifier, index, is_file_namespace)
        self._log.warning("%s", self.report.violations[-1])

    def key_error(
        self,
        identifier: str,
        index: int,
        is_file_namespace: bool,
        is_duplicate: bool,
    ) -> None:
        super().key_error(identifier, index, is_file_namespace, is_duplicate)
        self._log.warning("%s", self.report.violations[-1])

    def type_error(self, identifier: str, index: int, is_file_namespace: bool) -> None:
        super().type_error(identifier, index, is_file_namespace)
        self._log.warning("%s", self.report.violations[-1])
