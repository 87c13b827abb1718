"""
Mosaic Config - Typed Model, Schema Validation, and Storage

Overview:
---------
A *mosaic config* records every mosaic chain deployed against one origin
chain: the origin chain's name and library addresses, and per auxiliary
chain its chain id, boot nodes, genesis block and the contract addresses on
both sides.  One JSON file per origin chain lives in the project's
``mosaic_configs`` directory.

Key Behaviours:
--------------
- Nested records are always populated; a partial or empty object yields a
  fully formed model and ``null`` nested objects are replaced by defaults.
- Files are validated against the bundled JSON Schema before a model is
  built; violations raise :class:`~mosaic.exceptions.InvalidMosaicConfigError`.
- A missing or blank file is not an error: it loads as the default config.
- Saving validates against the same schema first, then replaces the whole
  file atomically (temp file + ``os.replace``).
"""

from __future__ import annotations

import json
import os
import tempfile
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft7Validator
from jsonschema import ValidationError as SchemaViolation
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationError,
    field_validator,
    model_serializer,
)

from .directory import Directory
from .exceptions import (
    InvalidArgumentError,
    InvalidMosaicConfigError,
    MalformedConfigError,
)
from .utils.logging import get_logger

logger = get_logger(__name__)

Address = str

SCHEMA_PACKAGE = "mosaic.schemas"
SCHEMA_FILENAME = "mosaic_config.schema.json"
JSON_INDENT = 4


def _empty_if_null(value: Any, empty: Any) -> Any:
    return empty if value is None else value


# --------------------------------------------------------------------------- #
# Data model                                                                  #
# --------------------------------------------------------------------------- #

class _ConfigRecord(BaseModel):
    """Base for all config records: camelCase keys, unknown keys kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_serializer(mode="wrap")
    def _omit_unset_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Unset scalars are left out of the file rather than written as null.
        data = handler(self)
        fields = type(self).model_fields
        declared = set(fields) | {f.alias for f in fields.values() if f.alias}
        return {k: v for k, v in data.items() if not (v is None and k in declared)}


class OriginLibraries(_ConfigRecord):
    """Contract addresses on the origin chain, independent of any auxiliary chain."""

    simple_token_address: Address | None = Field(None, alias="simpleTokenAddress")
    merkle_patricia_lib_address: Address | None = Field(None, alias="merklePatriciaLibAddress")
    gateway_lib_address: Address | None = Field(None, alias="gatewayLibAddress")
    message_bus_address: Address | None = Field(None, alias="messageBusAddress")
    ost_composer_address: Address | None = Field(None, alias="ostComposerAddress")


class OriginChain(_ConfigRecord):
    """Origin chain identity and its libraries."""

    chain: str | None = None
    contract_addresses: OriginLibraries = Field(
        default_factory=OriginLibraries, alias="contractAddresses"
    )

    @field_validator("contract_addresses", mode="before")
    @classmethod
    def _default_contract_addresses(cls, value: Any) -> Any:
        return _empty_if_null(value, {})


class OriginContracts(_ConfigRecord):
    """Origin chain contracts specific to one auxiliary chain."""

    anchor_organization_address: Address | None = Field(None, alias="anchorOrganizationAddress")
    anchor_address: Address | None = Field(None, alias="anchorAddress")
    ost_gateway_organization_address: Address | None = Field(
        None, alias="ostGatewayOrganizationAddress"
    )
    ost_eip20_gateway_address: Address | None = Field(None, alias="ostEIP20GatewayAddress")


class AuxiliaryContracts(_ConfigRecord):
    """Contracts deployed on the auxiliary chain itself."""

    ost_prime_address: Address | None = Field(None, alias="ostPrimeAddress")
    anchor_organization_address: Address | None = Field(None, alias="anchorOrganizationAddress")
    anchor_address: Address | None = Field(None, alias="anchorAddress")
    merkle_patricia_lib_address: Address | None = Field(None, alias="merklePatriciaLibAddress")
    gateway_lib_address: Address | None = Field(None, alias="gatewayLibAddress")
    message_bus_address: Address | None = Field(None, alias="messageBusAddress")
    ost_co_gateway_organization_address: Address | None = Field(
        None, alias="ostCoGatewayOrganizationAddress"
    )
    ost_eip20_cogateway_address: Address | None = Field(None, alias="ostEIP20CogatewayAddress")


class ContractAddresses(_ConfigRecord):
    """Origin and auxiliary contract addresses of one auxiliary chain."""

    origin: OriginContracts = Field(default_factory=OriginContracts)
    auxiliary: AuxiliaryContracts = Field(default_factory=AuxiliaryContracts)

    @field_validator("origin", "auxiliary", mode="before")
    @classmethod
    def _default_sides(cls, value: Any) -> Any:
        return _empty_if_null(value, {})


class AuxiliaryChain(_ConfigRecord):
    """Config of one auxiliary chain."""

    chain_id: int | None = Field(None, alias="chainId")
    boot_nodes: list[str] = Field(default_factory=list, alias="bootNodes")
    genesis: dict[str, Any] | None = None
    contract_addresses: ContractAddresses = Field(
        default_factory=ContractAddresses, alias="contractAddresses"
    )

    @field_validator("boot_nodes", mode="before")
    @classmethod
    def _default_boot_nodes(cls, value: Any) -> Any:
        return _empty_if_null(value, [])

    @field_validator("contract_addresses", mode="before")
    @classmethod
    def _default_contract_addresses(cls, value: Any) -> Any:
        return _empty_if_null(value, {})


class MosaicConfig(_ConfigRecord):
    """Mosaic chains of one origin chain, keyed by auxiliary chain name."""

    origin_chain: OriginChain = Field(default_factory=OriginChain, alias="originChain")
    auxiliary_chains: dict[str, AuxiliaryChain] = Field(
        default_factory=dict, alias="auxiliaryChains"
    )

    @field_validator("origin_chain", "auxiliary_chains", mode="before")
    @classmethod
    def _default_members(cls, value: Any) -> Any:
        return _empty_if_null(value, {})

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "MosaicConfig":
        """Build a config from a parsed JSON object, filling in defaults."""
        try:
            return cls.model_validate(data or {})
        except ValidationError as exc:
            messages = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            ]
            raise InvalidMosaicConfigError(
                f"invalid mosaic config: {'; '.join(messages)}", errors=messages
            ) from exc

    @classmethod
    def from_chain(cls, chain: str, directory: Optional[Directory] = None) -> "MosaicConfig":
        """Read the mosaic config of ``chain`` from the project config directory."""
        return load(chain, directory=directory)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with the on-disk camelCase keys in declaration order."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=JSON_INDENT, ensure_ascii=False) + "\n"

    def write_to_mosaic_config_directory(self, directory: Optional[Directory] = None) -> Path:
        """Save this config into the project config directory."""
        return save(self, directory=directory)


# --------------------------------------------------------------------------- #
# Schema                                                                      #
# --------------------------------------------------------------------------- #

@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Return the bundled mosaic config schema (shared, do not mutate)."""
    text = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_FILENAME).read_text(encoding="utf-8")
    return json.loads(text)


@lru_cache(maxsize=1)
def _validator() -> Draft7Validator:
    return Draft7Validator(load_schema())


def _json_path(error: SchemaViolation) -> str:
    return "$" + "".join(
        f"[{p}]" if isinstance(p, int) else f".{p}" for p in error.absolute_path
    )


def schema_errors(instance: Any) -> list[str]:
    """Return every schema violation of ``instance``; empty when valid."""
    messages = [f"{_json_path(e)}: {e.message}" for e in _validator().iter_errors(instance)]
    return sorted(messages)


def validate_schema(instance: Any, path: Optional[Path] = None) -> None:
    """Raise :class:`InvalidMosaicConfigError` unless ``instance`` matches the schema."""
    errors = schema_errors(instance)
    if errors:
        where = f" in {path}" if path else ""
        raise InvalidMosaicConfigError(
            f"invalid mosaic config{where}: {'; '.join(errors)}",
            errors=errors,
            path=path,
        )


# --------------------------------------------------------------------------- #
# Storage                                                                     #
# --------------------------------------------------------------------------- #

def config_path(chain_name: str, directory: Optional[Directory] = None) -> Path:
    directory = directory or Directory.from_settings()
    return directory.project_mosaic_config_dir() / f"{chain_name}.json"


def exists(chain_name: str, directory: Optional[Directory] = None) -> bool:
    return config_path(chain_name, directory).is_file()


def list_chains(directory: Optional[Directory] = None) -> list[str]:
    """Names of the origin chains that have a working config file."""
    directory = directory or Directory.from_settings()
    config_dir = directory.project_mosaic_config_dir()
    if not config_dir.is_dir():
        return []
    return sorted(p.stem for p in config_dir.glob("*.json") if p.is_file())


def load(chain_name: str, *, directory: Optional[Directory] = None) -> MosaicConfig:
    """
    Load the mosaic config of ``chain_name``.

    Returns the default config when no file exists or the file is blank.

    Raises
    ------
    MalformedConfigError
        If the file content is not UTF-8 encoded JSON.
    InvalidMosaicConfigError
        If the JSON does not satisfy the mosaic config schema.
    """
    file_path = config_path(chain_name, directory)
    if not file_path.exists():
        logger.debug("no mosaic config at %s, using defaults", file_path)
        return MosaicConfig.from_dict({})

    try:
        content = file_path.read_bytes().decode("utf-8")
        if not content.strip():
            logger.warning("mosaic config %s is empty, using defaults", file_path)
            return MosaicConfig.from_dict({})
        raw = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedConfigError(f"Invalid JSON in {file_path}: {exc}", path=file_path) from exc

    validate_schema(raw, path=file_path)
    logger.debug("loaded mosaic config %s", file_path)
    return MosaicConfig.from_dict(raw)


def save(config: MosaicConfig, *, directory: Optional[Directory] = None) -> Path:
    """Write ``config`` to ``<project_root>/mosaic_configs/<origin chain>.json``."""
    directory = directory or Directory.from_settings()
    return _write_config(config, directory.project_mosaic_config_dir())


def publish(config: MosaicConfig, *, directory: Optional[Directory] = None) -> Path:
    """Write ``config`` to the published configs directory (``~/.mosaic/configs``)."""
    directory = directory or Directory.from_settings()
    return _write_config(config, directory.publish_config_dir())


def _write_config(config: MosaicConfig, target_dir: Path) -> Path:
    chain = config.origin_chain.chain
    if not chain:
        raise InvalidArgumentError("origin chain name must be set to store a mosaic config")

    target = target_dir / f"{chain}.json"
    # Never write a file that load() would reject.
    validate_schema(config.to_dict(), path=target)

    target_dir.mkdir(parents=True, exist_ok=True)
    logger.info("storing mosaic config: %s", target)
    _atomic_write_text(target, config.to_json())
    return target


def _atomic_write_text(path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


__all__ = [
    "Address",
    "OriginLibraries",
    "OriginChain",
    "OriginContracts",
    "AuxiliaryContracts",
    "ContractAddresses",
    "AuxiliaryChain",
    "MosaicConfig",
    "load_schema",
    "schema_errors",
    "validate_schema",
    "config_path",
    "exists",
    "list_chains",
    "load",
    "save",
    "publish",
]
