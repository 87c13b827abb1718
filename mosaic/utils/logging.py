"""
Mosaic Logging Utilities - Session-Based File Logging

Overview:
---------
Centralised logging configuration for the mosaic tooling.  Library modules
only ever ask for a logger through :func:`get_logger`; handlers are attached
once by the entry point (the CLI) through :func:`setup_logging`.

Log Location:
-------------
- Default: ~/.mosaic/logs/
- Each CLI run creates a timestamped log file with a session ID
- A symlink 'mosaic.log' always points to the latest session
- Can be overridden via the MOSAIC_LOG_DIR environment variable

Usage:
------
    from mosaic.utils.logging import get_logger, setup_logging

    log_file = setup_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.info("storing mosaic config")
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..settings import get_settings

# ============================================================================
# Constants
# ============================================================================

ROOT_LOGGER_NAME = "mosaic"
DEFAULT_LOG_LEVEL = "INFO"
SYMLINK_NAME = "mosaic.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# File format includes line numbers
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"

_log_file_path: Optional[Path] = None
_session_id: Optional[str] = None


# ============================================================================
# Session ID Filter & Formatter
# ============================================================================

class SessionIdFilter(logging.Filter):
    """Add session_id to all log records."""

    def __init__(self, session_id: str):
        super().__init__()
        self.session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = self.session_id  # type: ignore[attr-defined]
        return True


class SessionFormatter(logging.Formatter):
    """Formatter that defaults session_id to 'N/A' when the filter did not run."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id or "N/A"  # type: ignore[attr-defined]
        return super().format(record)


# ============================================================================
# Setup Functions
# ============================================================================

def generate_session_id() -> str:
    """Generate a short unique session ID (6 characters)."""
    return uuid.uuid4().hex[:6]


def get_log_directory() -> Path:
    """Get the log directory, respecting the MOSAIC_LOG_DIR environment variable."""
    env_log_dir = os.getenv("MOSAIC_LOG_DIR")
    if env_log_dir:
        return Path(env_log_dir)
    return get_settings().log_dir


def generate_log_filename(session_id: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"mosaic_{timestamp}_{session_id}.log"


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    console_output: bool = False,
    quiet: bool = False,
) -> Path:
    """
    Initialise mosaic logging with a session log file and optional console output.

    Parameters
    ----------
    level : str, optional
        Log level: DEBUG, INFO, WARNING, ERROR.  Defaults to the
        MOSAIC_LOG_LEVEL setting.
    log_dir : Path, optional
        Directory for log files.  Defaults to ~/.mosaic/logs/
    console_output : bool
        If True, also log to stderr.
    quiet : bool
        If True, suppress console output entirely.

    Returns
    -------
    Path
        Path to the log file being written to.
    """
    global _log_file_path, _session_id

    _session_id = generate_session_id()

    if level is None:
        level = get_settings().log_level or DEFAULT_LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_dir is None:
        log_dir = get_log_directory()
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / generate_log_filename(_session_id)
    _log_file_path = log_file

    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for f in root.filters[:]:
        root.removeFilter(f)

    root.setLevel(log_level)
    root.addFilter(SessionIdFilter(_session_id))

    # No rotation - each session gets its own file
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(SessionFormatter(FILE_LOG_FORMAT, LOG_DATE_FORMAT))
    root.addHandler(file_handler)

    if console_output and not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(SessionFormatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(console_handler)

    root.propagate = False

    symlink_path = log_dir / SYMLINK_NAME
    try:
        if symlink_path.is_symlink() or symlink_path.exists():
            symlink_path.unlink()
        symlink_path.symlink_to(log_file.name)
    except OSError:
        # Symlinks need extra privileges on some platforms; the session file is enough.
        root.debug("could not update %s", symlink_path)

    root.info("mosaic logging session %s started, level %s", _session_id, level.upper())
    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``mosaic`` namespace.

    Example
    -------
        logger = get_logger(__name__)
        logger.debug("resolving config directory")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_current_log_file() -> Optional[Path]:
    """Return the path to the current log file, if logging is initialised."""
    return _log_file_path


def get_session_id() -> Optional[str]:
    return _session_id


__all__ = [
    "setup_logging",
    "get_logger",
    "get_log_directory",
    "get_current_log_file",
    "get_session_id",
]
