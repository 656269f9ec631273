#!/usr/bin/env python3
"""
Formatting helpers for SchemaForm.

- One-line rendering of format-validator error mappings.
"""
from __future__ import annotations

from typing import Any, Mapping


# --- Public API --- #

def format_format_error(error: Mapping[str, Any]) -> str:
    """
    Render a format-validator error mapping as one line.

    Example:
        {"format": {"required_format": "email", "current_value": "x"}}
        -> "'x' is not a valid 'email'"
    """
    details = error.get("format") or {}
    required = details.get("required_format", "<unknown>")
    current = details.get("current_value")
    return f"{current!r} is not a valid {required!r}"
