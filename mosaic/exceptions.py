"""Exceptions raised by the mosaic configuration core."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class MosaicError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(MosaicError, ValueError):
    """A caller passed an argument that cannot name a path or file."""


class MalformedConfigError(MosaicError, ValueError):
    """A config file exists but its content is not UTF-8 encoded JSON."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class InvalidMosaicConfigError(MosaicError, ValueError):
    """Well-formed JSON that does not satisfy the mosaic config schema.

    ``errors`` holds the validator's diagnostics, one message per violation.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Sequence[str]] = None,
        path: Optional[Path] = None,
    ):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]
        self.path = path


__all__ = [
    "MosaicError",
    "InvalidArgumentError",
    "MalformedConfigError",
    "InvalidMosaicConfigError",
]
