#!/usr/bin/env python3
"""
SchemaForm configuration loader and logging setup.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Final, Mapping

from schemaform.core.constants import DEFAULT_DATE_FORMAT
from schemaform.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "date_format": DEFAULT_DATE_FORMAT,
    "locale": None,
    "logging": {"level": "WARNING"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "schemaform" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "schemaform.json"

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load SchemaForm configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/schemaform/config.json)
        3. Project config (./schemaform.json)
        4. Environment overrides:
           - SCHEMAFORM_DATE_FORMAT
           - SCHEMAFORM_LOCALE
           - SCHEMAFORM_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    date_format_env = os.getenv("SCHEMAFORM_DATE_FORMAT")
    if date_format_env:
        config["date_format"] = date_format_env

    locale_env = os.getenv("SCHEMAFORM_LOCALE")
    if locale_env:
        config["locale"] = locale_env

    log_level_env = os.getenv("SCHEMAFORM_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config


def configure_logging(config: Mapping[str, Any]) -> int:
    """
    Apply `config['logging']['level']` to the root logger.

    Unknown level names fall back to WARNING. Returns the numeric level applied.
    """
    name = str((config.get("logging") or {}).get("level", "WARNING")).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
