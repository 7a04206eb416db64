# alignany/utils/logging_config.py
"""alignany.utils.logging_config
===============================

Logging configuration for alignany. It defines the global application logger
and a single setup function, `setup_logging`, which configures handlers and
log levels from the `[logging]` section of the application configuration.

Features:
    - Rotating file logging (alignany.log) in a configurable directory.
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Automatic creation of the log directory, with fallback to the system
      temp directory on failure.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs
      when called multiple times.
    - Never raises; problems are reported to stderr and logging continues
      with a best-effort configuration.

Globals:
    logger: Main application logger ("alignany").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional


# ======================== Global logger ========================
# Created at import-time, unconfigured until ``setup_logging()`` runs.
logger = logging.getLogger("alignany")

DEFAULT_LOG_DIR = Path.home() / ".cache" / "alignany"


def _resolve_log_dir(configured: Optional[str]) -> str:
    """Returns a writable log directory, falling back to the temp dir."""
    log_dir = os.path.expanduser(configured) if configured else str(DEFAULT_LOG_DIR)
    try:
        os.makedirs(log_dir, exist_ok=True)
        return log_dir
    except OSError as e_mkdir:
        print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
        fallback = tempfile.gettempdir()
        print(f"Logging to temporary directory: '{fallback}'", file=sys.stderr)
        return fallback


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to three independent handlers are attached to the root logger:

    1. File handler: rotating ``alignany.log`` capturing everything from
       ``file_level`` (default DEBUG) upward. Disabled by ``log_to_file = false``.
    2. Console handler: optional ``stderr`` output whose threshold is
       ``console_level`` (default WARNING).
    3. Error-file handler: optional rotating ``error.log`` that stores only
       ERROR and CRITICAL events.

    Existing handlers on the root logger are cleared first, so calling this
    twice (e.g. in unit tests) does not duplicate records.

    Args:
        config (dict | None): Application configuration. Only the
            ``["logging"]`` sub-section is consulted; recognised keys are
            ``log_dir``, ``log_to_file``, ``file_level``, ``console_level``,
            ``log_to_console`` and ``separate_error_log``.

    Example:
        >>> setup_logging({"logging": {"console_level": "ERROR", "log_to_file": False}})
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )

    file_handler = None
    error_file_handler = None
    log_dir = None
    if logging_config.get("log_to_file", True) or logging_config.get("separate_error_log", False):
        log_dir = _resolve_log_dir(logging_config.get("log_dir"))

    if log_dir and logging_config.get("log_to_file", True):
        log_filename = os.path.join(log_dir, "alignany.log")
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(log_file_level)
        except Exception as e_fh:
            print(
                f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
                file=sys.stderr,
            )
            file_handler = None

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_log_level = getattr(logging, console_level_str, logging.WARNING)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        )
        console_handler.setLevel(console_log_level)

    # Optional Separate Error Log File
    if log_dir and logging_config.get("separate_error_log", False):
        error_log_filename = os.path.join(log_dir, "error.log")
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename,
                maxBytes=1 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except Exception as e_efh:
            print(
                f"Error setting up separate error log '{error_log_filename}': {e_efh}.",
                file=sys.stderr,
            )
            error_file_handler = None

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing root handlers to avoid duplicates

    levels = []
    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
            levels.append(handler.level)

    if not levels:
        # Module-level logging.* calls would otherwise trigger basicConfig().
        root_logger.addHandler(logging.NullHandler())

    # Root must let through the most verbose level any handler wants.
    root_logger.setLevel(min(levels) if levels else logging.WARNING)

    logger.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logger.info(
            f"File logging to '{file_handler.baseFilename}' at level: {logging.getLevelName(file_handler.level)}."
        )
    if console_handler:
        logger.info(
            f"Console logging to stderr at level: {logging.getLevelName(console_handler.level)}."
        )
    if error_file_handler:
        logger.info("Error logging to 'error.log' at level: ERROR.")
