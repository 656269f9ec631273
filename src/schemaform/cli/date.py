#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Any, Dict

from schemaform.core.date_functions import date_to_string, find_date, string_to_date
from schemaform.core.options import DateFormatOptions


def find_cmd(args, cfg: Dict[str, Any]) -> int:
    found = find_date(args.text)
    if found is None:
        print("No date found.")
        return 1
    print(found)
    return 0


def parse_cmd(args, cfg: Dict[str, Any]) -> int:
    parsed = string_to_date(args.text, reference_year=args.reference_year)
    if parsed is None:
        print("Could not parse a date.")
        return 1
    print(parsed.isoformat())
    return 0


def format_cmd(args, cfg: Dict[str, Any]) -> int:
    options = DateFormatOptions.from_config(cfg)
    if args.format:
        options = DateFormatOptions.coerce({"date_format": args.format, "locale": options.locale})
    rendered = date_to_string(args.value, options)
    if rendered is None:
        print("Could not parse a date.")
        return 1
    print(rendered)
    return 0


def register(subparsers: argparse._SubParsersAction):
    sp = subparsers.add_parser("date", help="Find, parse and format dates")
    sps = sp.add_subparsers(dest="date_cmd")

    # default when user runs: `schemaform date`
    def date_default(args, cfg: Dict[str, Any]) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=date_default)

    findp = sps.add_parser("find", help="Print the first date-like substring of TEXT")
    findp.add_argument("text")
    findp.set_defaults(func=find_cmd)

    parsep = sps.add_parser("parse", help="Parse TEXT and print the date as YYYY-MM-DD")
    parsep.add_argument("text")
    parsep.add_argument("--reference-year", type=int, default=None,
                        help="Year used to resolve two-digit years (default: current year)")
    parsep.set_defaults(func=parse_cmd)

    formatp = sps.add_parser("format", help="Render VALUE with a token template")
    formatp.add_argument("value")
    formatp.add_argument("--format", "-f", default=None,
                         help="Token template, e.g. 'MMMM D, YYYY' (default: config date_format)")
    formatp.set_defaults(func=format_cmd)
