#!/usr/bin/env python3
"""
Purpose:
    String-format validation for form values.

    - `validate_format`: pure yes/no check of a string against a named format.
    - `format_validator`: builds a form-control validator returning an error
      mapping (or None), the shape a form-rendering layer attaches to fields.
    - `check_formats`: runs format validators over a flat mapping of field
      values and collects the failures.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Callable, Mapping, Optional

from schemaform.core.format_name import FormatName
from schemaform.core.format_regex import FORMAT_TESTS
from schemaform.core.validation import FormatCheckResult, FormatErrors

logger = logging.getLogger(__name__)

FormatValidatorFn = Callable[..., Optional[FormatErrors]]


class UnknownFormatError(KeyError, ValueError):
    """Raised when a format name has no validator."""

    def __init__(self, name: Any):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"{self.name!r} is not a recognized format. Known formats: {', '.join(FormatName.names())}"


# --- Public API --- #

def validate_format(name: str | FormatName, value: Any) -> bool:
    """
    Return True if `value` is a string satisfying the format `name`.

    Non-string values are never valid. Unknown format names raise
    `UnknownFormatError`; deciding what an unknown format means is up to the caller.
    """
    fmt = FormatName.parse(name)
    if fmt is None:
        raise UnknownFormatError(name)
    if not isinstance(value, str):
        return False
    return FORMAT_TESTS[fmt].matches(value)


def format_validator(required_format: str | FormatName | None) -> FormatValidatorFn:
    """
    Build a validator requiring a control value to have a certain format.

    The returned callable takes `(value, invert=False)` and returns None when
    the value passes, otherwise::

        {"format": {"required_format": "<name>", "current_value": <value>}}

    Rules:
        - no required format -> every value passes
        - `required_format` is matched exactly ("email", not "EMAIL" or " email")
        - empty values (None, "", [], {}) pass; presence is a separate concern
        - strings are checked against `FORMAT_TESTS`; an unrecognized format
          is logged and treated as passing
        - non-strings pass only for `date`, `time` and `date-time` when they
          are date/time objects
        - `invert=True` flips the outcome
    """
    if not required_format:
        return _null_validator

    fmt = _exact_format(required_format)
    format_label = fmt.value if fmt is not None else str(required_format)

    def _validate(value: Any, invert: bool = False) -> Optional[FormatErrors]:
        if _is_empty(value):
            return None
        if isinstance(value, str):
            if fmt is None:
                logger.error("format validator error: %r is not a recognized format.", required_format)
                is_valid = True
            else:
                is_valid = FORMAT_TESTS[fmt].matches(value)
        else:
            is_valid = (
                fmt is not None
                and fmt.is_temporal()
                and isinstance(value, (dt.date, dt.time))
            )
        if is_valid != invert:
            return None
        return {"format": {"required_format": format_label, "current_value": value}}

    return _validate


def check_formats(
    values: Mapping[str, Any],
    formats: Mapping[str, str | FormatName],
    *,
    strict: bool = False,
) -> FormatCheckResult:
    """
    Check each field in `formats` against its value in `values`.

    Fields missing from `values` are treated as empty and pass.

    Args:
        values:  field name -> submitted value
        formats: field name -> required format
        strict:  raise `FormatCheckError` (a `ValueError`) on the first failure
                 instead of collecting

    Returns:
        FormatCheckResult holding each failing field with its error mapping.
    """
    result = FormatCheckResult()
    for field, required_format in formats.items():
        result.record(field, format_validator(required_format)(values.get(field)), strict)
    logger.debug("Checked %d field format(s): %r", result.checked, result)
    return result


# --- Internals --- #

def _exact_format(name: Any) -> Optional[FormatName]:
    try:
        return FormatName(name)
    except ValueError:
        return None


def _null_validator(value: Any, invert: bool = False) -> Optional[FormatErrors]:
    return None


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False
