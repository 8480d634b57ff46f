"""Logging utilities for blockjump.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Configuration happens once at the application level. The TUI must never
write log records to the terminal it is drawing on, so setup_tui_logging()
routes everything to rotating files under the config directory.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from blockjump.config.constants import (
    BLOCKJUMP_CONFIG_DIR,
    KEY_EVENTS_LOG_FILE_NAME,
    LOG_BACKUP_COUNT,
    LOG_FILE_NAME,
    MAX_LOG_BYTES,
)

KEY_EVENTS_LOGGER = "key_events"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _rotating_handler(log_file: Path, fmt: str = _FORMAT) -> RotatingFileHandler:
    handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_tui_logging(
    module_name: str,
    verbose: bool = False,
    log_dir: Optional[Path] = None,
) -> tuple[logging.Logger, logging.Logger]:
    """
    Set up file logging for the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs.
    blockjump.* loggers go to INFO (DEBUG when verbose). Handled key
    combinations go to a separate key_events file.

    Returns:
        tuple: (main_logger, key_events_logger)
    """
    try:
        log_dir = log_dir or BLOCKJUMP_CONFIG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            root.addHandler(_rotating_handler(log_dir / LOG_FILE_NAME))
            root.setLevel(logging.WARNING)

        logging.getLogger("blockjump").setLevel(logging.DEBUG if verbose else logging.INFO)

        key_logger = logging.getLogger(KEY_EVENTS_LOGGER)
        if not key_logger.handlers:
            key_logger.addHandler(
                _rotating_handler(log_dir / KEY_EVENTS_LOG_FILE_NAME, "%(asctime)s - %(message)s")
            )
            key_logger.propagate = False
        key_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

        return logging.getLogger(module_name), key_logger

    except OSError as e:
        # Logging is what's failing, so say it on stderr before the TUI starts
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        return logging.getLogger(module_name), logging.getLogger(KEY_EVENTS_LOGGER)


def setup_cli_logging(verbose: bool = False) -> None:
    """Log warnings (or everything when verbose) to stderr for one-shot commands."""
    logger = logging.getLogger("blockjump")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
