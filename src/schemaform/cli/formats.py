#!/usr/bin/env python3
from typing import Any, Dict

from schemaform.core.format_name import FormatName


def register(subparsers):
    sp = subparsers.add_parser("formats", help="List supported string formats.")
    sp.set_defaults(func=list_formats)


def list_formats(args, cfg: Dict[str, Any]) -> int:
    width = max(len(name) for name in FormatName.names())
    for fmt in FormatName:
        print(f"{fmt.value:<{width}}  input={fmt.input_type()}")
    return 0
