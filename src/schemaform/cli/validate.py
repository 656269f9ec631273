#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from schemaform.core.utils import load_json_file
from schemaform.core.validators import UnknownFormatError, check_formats, validate_format


def validate_values(args, cfg: Dict[str, Any]) -> int:
    """Print PASS/FAIL per value; exit 1 if any fail, 2 for an unknown format."""
    failures = 0
    for value in args.values:
        try:
            ok = validate_format(args.format, value)
        except UnknownFormatError as e:
            print(f"Error: {e}")
            return 2
        if args.verbose or not ok:
            print(f"{'PASS' if ok else 'FAIL'}  {args.format}  {value!r}")
        if not ok:
            failures += 1
    print(f"\nValidation complete: {len(args.values) - failures}/{len(args.values)} passed.")
    return 0 if failures == 0 else 1


def check_file(args, cfg: Dict[str, Any]) -> int:
    """
    Check a JSON file of the form {"formats": {field: format}, "values": {field: value}}.
    """
    path = Path(args.file)
    if not path.exists():
        print(f"Error: file not found: {path}")
        return 2
    try:
        data = load_json_file(path)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    formats = data.get("formats") or {}
    values = data.get("values") or {}
    if not isinstance(formats, dict) or not isinstance(values, dict):
        print(f"Error: 'formats' and 'values' must be JSON objects in {path}")
        return 2

    result = check_formats(values, formats)
    for msg in result.messages():
        print(f"  - {msg}")
    print(f"\nCheck complete: {result.passed}/{result.checked} fields passed.")
    return 0 if result.is_valid() else 1


def register(subparser: argparse._SubParsersAction):
    parser = subparser.add_parser("validate", help="Validate values against a string format.")
    parser.add_argument("format", help="Format name (see `schemaform formats`).")
    parser.add_argument("values", nargs="+", help="Values to validate.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show results for all values.")
    parser.set_defaults(func=validate_values)

    checkp = subparser.add_parser("check", help="Check form values in a JSON file against field formats.")
    checkp.add_argument("file", help="JSON file with 'formats' and 'values' objects.")
    checkp.set_defaults(func=check_file)
