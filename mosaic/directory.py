"""
Mosaic Path Utilities - Directory Layout Resolution

Overview:
---------
Map logical names to absolute filesystem paths.  Every path is derived from
three roots held by :class:`~mosaic.settings.MosaicSettings` (home directory,
project root, working directory) so callers and tests can inject their own
instead of relying on process state.

Layout:
-------
- ``~/.mosaic``                                       user data root
- ``~/.mosaic/configs``                               published mosaic configs
- ``<project_root>/mosaic_configs``                   working mosaic configs
- ``<project_root>/utility_chains/utility_chain_<id>`` per-chain directories
- ``<project_root>/src/Graph``                        graph code

No function here touches the filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .exceptions import InvalidArgumentError
from .settings import MosaicSettings, get_settings

DATA_DIR_NAME = ".mosaic"
PUBLISH_DIR_NAME = "configs"
UTILITY_CHAINS_DIR_NAME = "utility_chains"
UTILITY_CHAIN_PREFIX = "utility_chain_"
MOSAIC_CONFIGS_DIR_NAME = "mosaic_configs"


class Directory:
    """Resolve mosaic directories relative to injected roots."""

    def __init__(
        self,
        home_dir: Path,
        project_root: Path,
        working_dir: Path,
    ):
        self.home_dir = Path(home_dir)
        self._project_root = Path(project_root)
        self.working_dir = Path(working_dir)

    @classmethod
    def from_settings(cls, settings: Optional[MosaicSettings] = None) -> "Directory":
        settings = settings or get_settings()
        return cls(settings.home_dir, settings.project_root, settings.working_dir)

    def default_data_dir(self) -> Path:
        """Directory in which mosaic data is stored."""
        return self.home_dir / DATA_DIR_NAME

    def publish_config_dir(self) -> Path:
        """Directory in which mosaic configs are published."""
        return self.default_data_dir() / PUBLISH_DIR_NAME

    def project_root(self) -> Path:
        return self._project_root

    def project_utility_chains_dir(self) -> Path:
        return self.project_root() / UTILITY_CHAINS_DIR_NAME

    def project_utility_chain_dir(self, chain_id: str) -> Path:
        """Directory of the utility chain with the given id.

        Raises
        ------
        InvalidArgumentError
            If ``chain_id`` is ``None`` or an empty string.
        """
        if chain_id is None or str(chain_id) == "":
            raise InvalidArgumentError(
                "a chain id cannot be empty in order to get its directory"
            )
        return self.project_utility_chains_dir() / f"{UTILITY_CHAIN_PREFIX}{chain_id}"

    def project_mosaic_config_dir(self) -> Path:
        """Directory of the code base where mosaic configs of existing chains live."""
        return self.project_root() / MOSAIC_CONFIGS_DIR_NAME

    def project_graph_dir(self) -> Path:
        return self.project_root() / "src" / "Graph"

    def sanitize(self, directory: str) -> str:
        """Expand a leading ``~`` and make relative paths absolute.

        The tilde branch keeps the remainder verbatim (``~/foo`` becomes
        ``<home>/foo``); only paths that did not start with ``~`` are joined
        onto the working directory.
        """
        if directory.startswith("~"):
            return f"{self.home_dir}{directory[1:]}"
        if not directory.startswith(os.sep):
            return os.path.join(str(self.working_dir), directory)
        return directory


def _default() -> Directory:
    return Directory.from_settings(get_settings())


def default_data_dir() -> Path:
    return _default().default_data_dir()


def publish_config_dir() -> Path:
    return _default().publish_config_dir()


def project_root() -> Path:
    return _default().project_root()


def project_utility_chains_dir() -> Path:
    return _default().project_utility_chains_dir()


def project_utility_chain_dir(chain_id: str) -> Path:
    return _default().project_utility_chain_dir(chain_id)


def project_mosaic_config_dir() -> Path:
    return _default().project_mosaic_config_dir()


def project_graph_dir() -> Path:
    return _default().project_graph_dir()


def sanitize(directory: str) -> str:
    return _default().sanitize(directory)


__all__ = [
    "Directory",
    "default_data_dir",
    "publish_config_dir",
    "project_root",
    "project_utility_chains_dir",
    "project_utility_chain_dir",
    "project_mosaic_config_dir",
    "project_graph_dir",
    "sanitize",
]
