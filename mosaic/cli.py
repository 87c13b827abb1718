# mosaic/cli.py
"""
Mosaic CLI -- Click commands over the config store and path resolver.

Provides the ``mosaic`` console entry-point declared in pyproject.toml as
``mosaic.cli:cli``:

- paths:            resolved data, config and chain directories
- sanitize:         expand ``~`` and make a path absolute
- config show:      origin and auxiliary chains of a mosaic config
- config list:      chains that have a working mosaic config
- config validate:  check a JSON file against the mosaic config schema
- config publish:   copy a working mosaic config to ~/.mosaic/configs
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape as _esc

from . import __version__
from . import cli_theme as theme
from . import mosaic_config as store
from .directory import Directory
from .exceptions import MosaicError
from .utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _print_version(
    ctx: click.Context,
    _param: click.Parameter,
    value: bool,
) -> None:
    if not value or ctx.resilient_parsing:
        return
    theme.print_version(__version__, console)
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Also write log records to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Mosaic -- configuration of mosaic chains."""
    setup_logging(console_output=verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# paths / sanitize
# ---------------------------------------------------------------------------


@cli.command("paths")
@click.option("--chain-id", default=None, help="Also resolve this utility chain's directory.")
def paths(chain_id: Optional[str]) -> None:
    """Show the directories mosaic reads and writes."""
    directory = Directory.from_settings()
    rows = [
        ("data_dir", directory.default_data_dir()),
        ("publish_config_dir", directory.publish_config_dir()),
        ("project_root", directory.project_root()),
        ("mosaic_config_dir", directory.project_mosaic_config_dir()),
        ("utility_chains_dir", directory.project_utility_chains_dir()),
        ("graph_dir", directory.project_graph_dir()),
    ]
    if chain_id is not None:
        try:
            rows.append(("utility_chain_dir", directory.project_utility_chain_dir(chain_id)))
        except MosaicError as exc:
            raise click.ClickException(str(exc)) from exc

    theme.section("Directories", console, "01")
    console.print(theme.key_value_table(rows))


@cli.command("sanitize")
@click.argument("path")
def sanitize(path: str) -> None:
    """Print PATH with ``~`` expanded and made absolute."""
    click.echo(Directory.from_settings().sanitize(path))


# ---------------------------------------------------------------------------
# config (group)
# ---------------------------------------------------------------------------


@cli.group()
def config() -> None:
    """Inspect, validate and publish mosaic configs."""


@config.command("list")
def config_list() -> None:
    """List chains that have a working mosaic config."""
    chains = store.list_chains()
    if not chains:
        console.print(theme.status("warn", "No mosaic configs found."))
        return
    for chain in chains:
        click.echo(chain)


@config.command("show")
@click.argument("chain")
def config_show(chain: str) -> None:
    """Show the mosaic config of origin chain CHAIN.

    \b
    Examples:
      mosaic config show dev-origin
    """
    if not store.exists(chain):
        console.print(
            theme.status("warn", f"No mosaic config for {_esc(chain)}; showing defaults.")
        )
    try:
        cfg = store.load(chain)
    except MosaicError as exc:
        raise click.ClickException(str(exc)) from exc

    theme.section("Origin Chain", console, "01")
    libraries = cfg.origin_chain.contract_addresses.model_dump(by_alias=True)
    console.print(
        theme.key_value_table([("chain", cfg.origin_chain.chain), *libraries.items()])
    )

    theme.section("Auxiliary Chains", console, "02")
    if not cfg.auxiliary_chains:
        console.print(theme.status("info", "none"))
        return
    t = theme.chain_table("Name", "Chain id", "Boot nodes", "OST prime address")
    for name, aux in cfg.auxiliary_chains.items():
        t.add_row(
            _esc(name),
            str(aux.chain_id) if aux.chain_id is not None else "-",
            str(len(aux.boot_nodes)),
            _esc(aux.contract_addresses.auxiliary.ost_prime_address or "-"),
        )
    console.print(t)


@config.command("validate")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def config_validate(file: Path) -> None:
    """Check FILE against the mosaic config schema."""
    try:
        raw = json.loads(file.read_bytes().decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise click.ClickException(f"Invalid JSON in {file}: {exc}") from exc

    errors = store.schema_errors(raw)
    if errors:
        for message in errors:
            console.print(theme.status("err", _esc(message)))
        raise click.ClickException(f"{file} is not a valid mosaic config ({len(errors)} errors)")

    cfg = store.MosaicConfig.from_dict(raw)
    console.print(
        theme.status(
            "ok",
            f"{_esc(cfg.origin_chain.chain or '')}: "
            f"{len(cfg.auxiliary_chains)} auxiliary chain(s), schema valid"
        )
    )


@config.command("publish")
@click.argument("chain")
def config_publish(chain: str) -> None:
    """Publish the working mosaic config of CHAIN to ~/.mosaic/configs."""
    if not store.exists(chain):
        raise click.ClickException(f"No mosaic config for {chain}")
    try:
        cfg = store.load(chain)
        target = store.publish(cfg)
    except MosaicError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("published mosaic config of %s", chain)
    console.print(theme.status("ok", f"Published {_esc(chain)}"))
    console.print(theme.status("info", _esc(str(target))))
