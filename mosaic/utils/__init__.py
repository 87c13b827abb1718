"""
Mosaic Utilities Package - Cross-Cutting Helpers

Helpers reused by the config store and the CLI without importing heavier
dependencies at package load time.
"""

from .logging import (
    setup_logging,
    get_logger,
    get_log_directory,
    get_current_log_file,
    get_session_id,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_log_directory",
    "get_current_log_file",
    "get_session_id",
]
