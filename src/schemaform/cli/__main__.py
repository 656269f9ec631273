#!/usr/bin/env python3

import argparse
import sys

from schemaform.core.config import configure_logging, load_config
from schemaform.cli import config, date, formats, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schemaform", description="SchemaForm format and date toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept the loaded config)
    formats.register(subparsers)
    validate.register(subparsers)
    date.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        cfg = load_config()  # loaded once
        configure_logging(cfg)
        return args.func(args, cfg)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
