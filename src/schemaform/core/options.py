#!/usr/bin/env python3
"""
Pydantic model for date rendering options.

Accepts the camelCase keys used by form layouts (`dateFormat`) as well as the
Python field names, and never rejects malformed values: they fall back to
their defaults.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemaform.core.annotated_types import DateFormatTemplate, LocaleName
from schemaform.core.constants import DEFAULT_DATE_FORMAT

logger = logging.getLogger(__name__)


class DateFormatOptions(BaseModel):
    """
    Options for `date_to_string`.

    Fields
    ------
    date_format:
        Token template (alias ``dateFormat``). Missing, non-string or blank
        values become ``"YYYY-MM-DD"``.
    locale:
        Reserved for localized names and default templates. Stored but not
        used when rendering.

    Example
    -------
    >>> DateFormatOptions.coerce({"dateFormat": "MMMM D, YYYY"}).date_format
    'MMMM D, YYYY'
    >>> DateFormatOptions.coerce({"dateFormat": ""}).date_format
    'YYYY-MM-DD'
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    date_format: DateFormatTemplate = Field(
        default=DEFAULT_DATE_FORMAT,
        alias="dateFormat",
        description="Token template such as 'YYYY-MM-DD' or 'MMMM D, YYYY'.",
    )
    locale: LocaleName = Field(
        default=None,
        description="Reserved locale name (currently inert).",
    )

    # --- Constructors --- #

    @classmethod
    def coerce(cls, options: Any = None) -> DateFormatOptions:
        """
        Build options from None, an existing instance, or a mapping.

        Never raises: anything unusable yields the defaults.
        """
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            if options is not None:
                logger.debug("Ignoring date options of type %s", type(options).__name__)
            return cls()
        # Field normalizers absorb malformed values, so validation cannot fail
        return cls.model_validate(dict(options))

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]]) -> DateFormatOptions:
        """Build options from a loaded SchemaForm configuration dict."""
        config = config or {}
        return cls.coerce({
            "date_format": config.get("date_format"),
            "locale": config.get("locale"),
        })
