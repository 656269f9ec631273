#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for SchemaForm's
    Pydantic models, such as date token templates and locale names.
"""

from typing import Any, Annotated, Optional
from pydantic import BeforeValidator

from schemaform.core.constants import DEFAULT_DATE_FORMAT


# --- Normalizers --- #

def _normalize_date_format(v: Any) -> str:
    """
    Normalize a date token template:
    - non-strings (including None) -> DEFAULT_DATE_FORMAT
    - empty/whitespace-only -> DEFAULT_DATE_FORMAT
    - otherwise returned unchanged (spacing is part of the template)
    """
    if not isinstance(v, str) or not v.strip():
        return DEFAULT_DATE_FORMAT
    return v


def _normalize_locale(v: Any) -> Optional[str]:
    """
    Normalize a locale name:
    - non-strings (including None) -> None
    - trim whitespace; empty -> None
    """
    if not isinstance(v, str):
        return None
    text = v.strip()
    return text if text != "" else None


# --- Reusable Annotated types --- #

DateFormatTemplate = Annotated[str, BeforeValidator(_normalize_date_format)]
LocaleName = Annotated[Optional[str], BeforeValidator(_normalize_locale)]
