"""
Mosaic - configuration core for deploying mosaic chains

This package provides the typed mosaic config model, its JSON Schema
validation and storage, and the directory layout the tooling works in.

Main Components:
    - mosaic.mosaic_config: MosaicConfig model, load/save/publish
    - mosaic.directory: Path resolution for data, config and chain directories
    - mosaic.settings: Injected filesystem roots (MOSAIC_* environment)
    - mosaic.cli: ``mosaic`` command line
"""

from .directory import Directory
from .exceptions import (
    InvalidArgumentError,
    InvalidMosaicConfigError,
    MalformedConfigError,
    MosaicError,
)
from .mosaic_config import (
    AuxiliaryChain,
    AuxiliaryContracts,
    ContractAddresses,
    MosaicConfig,
    OriginChain,
    OriginContracts,
    OriginLibraries,
    load,
    publish,
    save,
    validate_schema,
)
from .settings import MosaicSettings, get_settings

__version__ = "0.1.0"

__all__ = [
    "Directory",
    "MosaicSettings",
    "get_settings",
    "MosaicError",
    "InvalidArgumentError",
    "InvalidMosaicConfigError",
    "MalformedConfigError",
    "OriginLibraries",
    "OriginChain",
    "OriginContracts",
    "AuxiliaryContracts",
    "ContractAddresses",
    "AuxiliaryChain",
    "MosaicConfig",
    "load",
    "save",
    "publish",
    "validate_schema",
]
