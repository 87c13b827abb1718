# tests/conftest.py
"""Shared fixtures: every test runs against roots inside tmp_path."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def mosaic_roots(tmp_path, monkeypatch):
    """Point MOSAIC_* roots into tmp_path and reset cached settings and logging."""
    from mosaic.settings import get_settings

    roots = {
        "home": tmp_path / "home",
        "project": tmp_path / "project",
        "cwd": tmp_path / "cwd",
        "logs": tmp_path / "logs",
    }
    monkeypatch.setenv("MOSAIC_HOME_DIR", str(roots["home"]))
    monkeypatch.setenv("MOSAIC_PROJECT_ROOT", str(roots["project"]))
    monkeypatch.setenv("MOSAIC_WORKING_DIR", str(roots["cwd"]))
    monkeypatch.setenv("MOSAIC_LOG_DIR", str(roots["logs"]))
    get_settings.cache_clear()

    yield roots

    get_settings.cache_clear()
    root = logging.getLogger("mosaic")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for f in root.filters[:]:
        root.removeFilter(f)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def directory(mosaic_roots):
    from mosaic.directory import Directory

    return Directory(
        home_dir=mosaic_roots["home"],
        project_root=mosaic_roots["project"],
        working_dir=mosaic_roots["cwd"],
    )


@pytest.fixture
def config_dir(mosaic_roots) -> Path:
    return mosaic_roots["project"] / "mosaic_configs"


@pytest.fixture
def sample_config() -> dict:
    """A schema-valid mosaic config with one auxiliary chain."""
    return {
        "originChain": {
            "chain": "dev-origin",
            "contractAddresses": {
                "simpleTokenAddress": "0x9ac77f4c0ca4d0f2142d7a77175cf4f1295fb2d8",
                "merklePatriciaLibAddress": "0x3e6e5b3bb3b6c1a8e0ff6f3c0f3d4b0b1a1d1e1f",
                "gatewayLibAddress": "0x2b2e5e2f1f3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e",
                "messageBusAddress": "0x1a1b1c1d1e1f2a2b2c2d2e2f3a3b3c3d3e3f4a4b",
                "ostComposerAddress": "0x5f5e5d5c5b5a4f4e4d4c4b4a3f3e3d3c3b3a2f2e",
            },
        },
        "auxiliaryChains": {
            "1405": {
                "chainId": 1405,
                "bootNodes": [
                    "enode://8b2a4d@10.0.0.1:30303",
                    "enode://0c1f9e@10.0.0.2:30303",
                ],
                "genesis": {
                    "config": {"chainId": 1405, "clique": {"period": 3, "epoch": 30000}},
                    "gasLimit": "0x2faf080",
                    "nonce": None,
                },
                "contractAddresses": {
                    "origin": {
                        "anchorOrganizationAddress": "0xa1",
                        "anchorAddress": "0xa2",
                        "ostGatewayOrganizationAddress": "0xa3",
                        "ostEIP20GatewayAddress": "0xa4",
                    },
                    "auxiliary": {
                        "ostPrimeAddress": "0xb1",
                        "anchorOrganizationAddress": "0xb2",
                        "anchorAddress": "0xb3",
                        "merklePatriciaLibAddress": "0xb4",
                        "gatewayLibAddress": "0xb5",
                        "messageBusAddress": "0xb6",
                        "ostCoGatewayOrganizationAddress": "0xb7",
                        "ostEIP20CogatewayAddress": "0xb8",
                    },
                },
            }
        },
    }
