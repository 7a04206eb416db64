# alignany/utils/utils.py
"""
alignany.utils.utils.py
=======================

Configuration helpers for alignany.

- Robust Configuration Loading: starts from a hardcoded, built-in default
  configuration and recursively merges user settings from
  `~/.config/alignany/config.toml` (or an explicit path) on top of it.
- Helper Utilities: deep-merging of dictionaries.

The application is always runnable: a missing or corrupted user file falls
back to the embedded defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

logger = logging.getLogger("alignany")

USER_CONFIG_PATH = Path.home() / ".config" / "alignany" / "config.toml"

# Hardcoded defaults. They are the ultimate fallback, so the tool can ALWAYS start.
DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "log_to_file": True,
        "log_dir": "~/.cache/alignany",
        "file_level": "DEBUG",
        "log_to_console": True,
        "console_level": "WARNING",
        "separate_error_log": False,
    },
    "alignment": {
        "assignment_pattern": " = ",
        "fallback_comment_pattern": "/[/*]",
    },
    # Extra or replacement entries for the comment-marker table,
    # e.g. {"nim": "#", "zig": "//"}.
    "comment_patterns": {},
}


def load_config(path: Optional[Union[str, "os.PathLike[str]"]] = None) -> Dict[str, Any]:
    """
    Loads the embedded defaults and merges the user's TOML file over them.

    Args:
        path: Explicit config file. Defaults to `~/.config/alignany/config.toml`.
            A missing file is not an error.
    """
    final_config = deep_merge({}, DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    config_path = Path(path).expanduser() if path is not None else USER_CONFIG_PATH
    if config_path.is_file():
        try:
            user_config = toml.load(config_path)
            for section, default in DEFAULT_CONFIG.items():
                value = user_config.get(section)
                if isinstance(default, dict) and value is not None and not isinstance(value, dict):
                    logger.warning(
                        f"Config '{config_path}': [{section}] must be a table, got {value!r}. Using defaults."
                    )
                    del user_config[section]
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {config_path}")
        except (toml.TomlDecodeError, OSError) as e:
            logger.error(f"Could not parse user config '{config_path}': {e}. Using defaults.")
    elif path is not None:
        logger.warning(f"Config file '{config_path}' not found. Using defaults.")

    return final_config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    Neither input is modified.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif isinstance(value, dict):
            result[key] = deep_merge({}, value)
        else:
            result[key] = value
    return result
