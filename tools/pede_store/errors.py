"""Typed error hierarchy for record persistence.

All failures raised by the package extend PedeError and carry structured
context, so hosts can catch them at their boundary and format them cleanly:
- ArgumentNullError halts a call before any lookup or side effect
- DecodeError / EncodeError report values that don't fit the requested type
- Document errors report unreadable or malformed data files

Validation never raises; violations are reported through an ErrorReporter
and may be collected into a ValidationReport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# -----------------------------------------------------------------------------
# Error Hierarchy
# -----------------------------------------------------------------------------

class PedeError(RuntimeError):
    """Base error for all record persistence operations.

    Never raise a raw PedeError; always use a specific subclass.
    """
    pass


class ArgumentNullError(PedeError, ValueError):
    """A required argument was None.

    Attributes:
        argument_name: Name of the missing argument
    """
    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Argument '{argument_name}' cannot be None")


class DecodeError(PedeError):
    """A stored value could not be parsed into the requested type.

    Attributes:
        type_tag: Tag of the type the value was decoded as
        raw_value: The stored string
        detail: Parser error message
    """
    def __init__(self, type_tag: str, raw_value: str, detail: str) -> None:
        self.type_tag = type_tag
        self.raw_value = raw_value
        self.detail = detail
        super().__init__(f"Cannot decode {raw_value!r} as '{type_tag}': {detail}")


class EncodeError(PedeError):
    """A value cannot be represented under the requested type.

    Attributes:
        type_tag: Tag of the requested type
        detail: Explanation of the mismatch
    """
    def __init__(self, type_tag: str, detail: str) -> None:
        self.type_tag = type_tag
        self.detail = detail
        super().__init__(f"Cannot encode value as '{type_tag}': {detail}")


class UnknownTypeTagError(PedeError):
    """Type tag has no registered Python type.

    Attributes:
        type_tag: The unresolved tag
    """
    def __init__(self, type_tag: str) -> None:
        self.type_tag = type_tag
        super().__init__(f"Unknown type tag '{type_tag}'")


class InvalidJsonError(PedeError):
    """JSON/JSON5 parsing of a data document failed.

    Attributes:
        path: The file that failed to parse
        detail: Parser error message
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid JSON in {path}: {detail}")


class InvalidDocumentError(PedeError):
    """Data document parsed but its structure is unusable.

    Attributes:
        path: The offending file
        detail: Explanation of the structural problem
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid data document {path}: {detail}")


# -----------------------------------------------------------------------------
# Validation Results
# -----------------------------------------------------------------------------

class ViolationKind(Enum):
    """Rule class a validation violation belongs to."""
    KEY = "key"
    TYPE = "type"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class ValidationViolation:
    """Single non-fatal rule failure found during validation.

    Attributes:
        kind: Which rule class failed
        identifier: Record value for key/type violations, record key for value violations
        index: Position of the record in its store
        is_file_namespace: True for the file-backed namespace
        is_duplicate: True for key violations caused by a repeated key
    """
    kind: ViolationKind
    identifier: str
    index: int
    is_file_namespace: bool
    is_duplicate: bool = False

    def __str__(self) -> str:
        namespace = "fileData" if self.is_file_namespace else "playerPrefData"
        if self.kind is ViolationKind.KEY:
            reason = "duplicate key" if self.is_duplicate else "empty key"
        elif self.kind is ViolationKind.TYPE:
            reason = "empty type"
        else:
            reason = "value does not decode under its type"
        return f"${namespace}[{self.index}]: {reason} ({self.identifier!r})"


@dataclass
class ValidationReport:
    """Aggregated validation violations.

    Invariants:
        - is_valid is True iff violations is empty
        - violations are kept in the order they were reported
    """
    violations: list[ValidationViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no violations were recorded."""
        return not self.violations

    def add(self, violation: ValidationViolation) -> None:
        """Record a violation."""
        self.violations.append(violation)

    def of_kind(self, kind: ViolationKind) -> list[ValidationViolation]:
        """Violations belonging to one rule class."""
        return [violation for violation in self.violations if violation.kind is kind]

    def __bool__(self) -> bool:
        """True if valid (no violations)."""
        return self.is_valid
