#!/usr/bin/env python3
"""
Purpose:
    Structured outcome of checking several form fields against their formats.

    Each failing field keeps the error mapping its format validator returned,
    so callers can attach it to the form control or render it as one line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from schemaform.core.formatting import format_format_error

FormatErrors = Dict[str, Dict[str, Any]]


@dataclass(frozen=True)
class FieldFormatError:
    """A failing field and its `{"format": {...}}` error mapping."""
    field: str
    errors: FormatErrors

    @property
    def required_format(self) -> Optional[str]:
        return (self.errors.get("format") or {}).get("required_format")

    @property
    def current_value(self) -> Any:
        return (self.errors.get("format") or {}).get("current_value")

    def message(self) -> str:
        return f"{self.field}: {format_format_error(self.errors)}"


class FormatCheckError(ValueError):
    """Raised by a strict check at the first failing field."""

    def __init__(self, failure: FieldFormatError):
        super().__init__(failure.message())
        self.failure = failure


class FormatCheckResult:
    """Counts checked fields and collects the ones that failed, in check order."""

    def __init__(self):
        self.failures: List[FieldFormatError] = []
        self.checked: int = 0

    def record(self, field: str, errors: Optional[FormatErrors], strict: bool = False) -> None:
        """
        Count one checked field, keeping its errors if it failed.

        Args:
            field (str): Field name.
            errors (dict | None): Validator output; None means the field passed.
            strict (bool): Raise `FormatCheckError` instead of collecting.
        """
        self.checked += 1
        if errors is None:
            return
        failure = FieldFormatError(field, errors)
        if strict:
            raise FormatCheckError(failure)
        self.failures.append(failure)

    @property
    def passed(self) -> int:
        return self.checked - len(self.failures)

    def is_valid(self) -> bool:
        return not self.failures

    def messages(self) -> List[str]:
        return [failure.message() for failure in self.failures]

    def form_errors(self) -> Dict[str, FormatErrors]:
        """Field name -> error mapping, as a form layer stores control errors."""
        return {failure.field: failure.errors for failure in self.failures}

    def __len__(self):
        return len(self.failures)

    def __iter__(self) -> Iterator[FieldFormatError]:
        return iter(self.failures)

    def __repr__(self):
        return f"<FormatCheckResult valid={self.is_valid()} checked={self.checked} failed={len(self.failures)}>"
