#!/usr/bin/env python3
"""
SchemaForm: format validation and flexible date handling for
JSON-Schema-driven forms.

    >>> from schemaform import validate_format, format_date
    >>> validate_format("ipv4", "255.255.255.255")
    True
    >>> format_date("2023-11-05", {"dateFormat": "MMMM D, YYYY"})
    'November 5, 2023'
"""

from schemaform.core.date_functions import (
    date_to_string,
    find_date,
    format_date,
    ordinal,
    parse_date,
    string_to_date,
)
from schemaform.core.format_name import FormatName
from schemaform.core.format_regex import FORMAT_TESTS, get_format_test
from schemaform.core.options import DateFormatOptions
from schemaform.core.validation import FieldFormatError, FormatCheckError, FormatCheckResult
from schemaform.core.validators import (
    UnknownFormatError,
    check_formats,
    format_validator,
    validate_format,
)

__version__ = "0.1.0"

__all__ = [
    "DateFormatOptions",
    "FORMAT_TESTS",
    "FieldFormatError",
    "FormatCheckError",
    "FormatCheckResult",
    "FormatName",
    "UnknownFormatError",
    "check_formats",
    "date_to_string",
    "find_date",
    "format_date",
    "format_validator",
    "get_format_test",
    "ordinal",
    "parse_date",
    "string_to_date",
    "validate_format",
]
