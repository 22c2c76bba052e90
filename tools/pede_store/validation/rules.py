"""Record validation rules.

Validation surfaces corruption left by external edits of a data document. It
runs on demand over a whole store and never raises for bad data. Every record
is checked against three independent rule classes in a single pass:

- key: the key is empty, or another record in the same store has the same key
  (type-blind, unlike lookups which are scoped to (key, type))
- type: the type tag is empty
- value: the value does not decode under its type tag; a record with an
  empty tag is always a value violation as well

A record may trigger several violations; none of them short-circuits the
others. Key and type violations identify the record by its value, since its
key may be empty. Value violations identify it by its key.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterable

from pede_store.errors import DecodeError
from pede_store.models.common import Namespace
from pede_store.models.record import Record
from pede_store.type_codec import decode_tag
from pede_store.validation.reporter import ErrorReporter

logger = logging.getLogger(__name__)


def validate_records(
    records: Iterable[Record],
    reporter: ErrorReporter,
    namespace: Namespace,
) -> bool:
    """Validate every record of one store.

    Args:
        records: The store's records, in order
        reporter: Receives each violation as it is found
        namespace: Store being validated (sets the is_file_namespace flag)

    Returns:
        True iff no record violated any rule
    """
    records = list(records)
    is_file = namespace.is_file
    key_counts = Counter(record.key for record in records)
    is_valid = True

    for index, record in enumerate(records):
        if not record.key:
            _notify(reporter.key_error, record.value, index, is_file, False)
            is_valid = False

        if key_counts[record.key] > 1:
            _notify(reporter.key_error, record.value, index, is_file, True)
            is_valid = False

        if not record.type_tag:
            _notify(reporter.type_error, record.value, index, is_file)
            is_valid = False

        if not _value_decodes(record):
            _notify(reporter.value_error, record.key, index, is_file)
            is_valid = False

    logger.debug(
        "Validated %d %s records: %s",
        len(records),
        namespace.field_name,
        "ok" if is_valid else "violations found",
    )
    return is_valid


def _value_decodes(record: Record) -> bool:
    if not record.type_tag:
        return False
    try:
        decode_tag(record.type_tag, record.value)
    except DecodeError:
        return False
    return True


def _notify(callback: Callable[..., None], *args: object) -> None:
    """Invoke a reporter callback; its failures never stop validation."""
    try:
        callback(*args)
    except Exception:
        logger.exception("Error reporter callback failed for record %s", args[1])
