# tests/test_mosaic_config_models.py
"""Tests for the MosaicConfig data model and its JSON shape."""

from __future__ import annotations

import json

import pytest


@pytest.mark.unit
class TestDefaults:
    def test_empty_config_is_fully_populated(self):
        from mosaic.mosaic_config import MosaicConfig, OriginLibraries

        cfg = MosaicConfig()
        assert cfg.origin_chain is not None
        assert cfg.origin_chain.chain is None
        assert cfg.origin_chain.contract_addresses == OriginLibraries()
        assert cfg.auxiliary_chains == {}

    def test_from_empty_dict(self):
        from mosaic.mosaic_config import MosaicConfig

        assert MosaicConfig.from_dict({}) == MosaicConfig()
        assert MosaicConfig.from_dict(None) == MosaicConfig()

    def test_null_members_are_defaulted(self):
        from mosaic.mosaic_config import MosaicConfig

        cfg = MosaicConfig.from_dict(
            {
                "originChain": {"chain": "dev", "contractAddresses": None},
                "auxiliaryChains": {
                    "a": {"chainId": 1, "bootNodes": None, "contractAddresses": None}
                },
            }
        )
        assert cfg.origin_chain.contract_addresses is not None
        aux = cfg.auxiliary_chains["a"]
        assert aux.boot_nodes == []
        assert aux.contract_addresses.origin is not None
        assert aux.contract_addresses.auxiliary is not None

    def test_null_root_members(self):
        from mosaic.mosaic_config import MosaicConfig

        cfg = MosaicConfig.from_dict({"originChain": None, "auxiliaryChains": None})
        assert cfg == MosaicConfig()

    def test_fresh_auxiliary_chain_serialises(self):
        from mosaic.mosaic_config import AuxiliaryChain

        aux = AuxiliaryChain()
        assert aux.model_dump(by_alias=True) == {
            "bootNodes": [],
            "contractAddresses": {"origin": {}, "auxiliary": {}},
        }

    def test_defaults_are_not_shared(self):
        from mosaic.mosaic_config import AuxiliaryChain

        a, b = AuxiliaryChain(), AuxiliaryChain()
        a.boot_nodes.append("enode://x")
        assert b.boot_nodes == []
        assert a.contract_addresses is not b.contract_addresses


@pytest.mark.unit
class TestFromDict:
    def test_camel_case_keys_map_to_fields(self, sample_config):
        from mosaic.mosaic_config import MosaicConfig

        cfg = MosaicConfig.from_dict(sample_config)
        assert cfg.origin_chain.chain == "dev-origin"
        assert cfg.origin_chain.contract_addresses.ost_composer_address.startswith("0x5f")
        aux = cfg.auxiliary_chains["1405"]
        assert aux.chain_id == 1405
        assert len(aux.boot_nodes) == 2
        assert aux.genesis["gasLimit"] == "0x2faf080"
        assert aux.contract_addresses.origin.ost_eip20_gateway_address == "0xa4"
        assert aux.contract_addresses.auxiliary.ost_co_gateway_organization_address == "0xb7"
        assert aux.contract_addresses.auxiliary.ost_eip20_cogateway_address == "0xb8"

    def test_type_mismatch_raises_invalid_config(self):
        from mosaic.exceptions import InvalidMosaicConfigError
        from mosaic.mosaic_config import MosaicConfig

        with pytest.raises(InvalidMosaicConfigError) as excinfo:
            MosaicConfig.from_dict({"auxiliaryChains": {"a": {"chainId": "not-a-number"}}})
        assert any("chainId" in e or "chain_id" in e for e in excinfo.value.errors)

    def test_populate_by_field_name(self):
        from mosaic.mosaic_config import OriginChain

        origin = OriginChain(chain="dev", contract_addresses={"simple_token_address": "0x1"})
        assert origin.contract_addresses.simple_token_address == "0x1"

    def test_unknown_keys_survive(self):
        from mosaic.mosaic_config import MosaicConfig

        cfg = MosaicConfig.from_dict({"originChain": {"chain": "dev", "rpc": "http://x"}})
        assert cfg.to_dict()["originChain"]["rpc"] == "http://x"


@pytest.mark.unit
class TestSerialisation:
    def test_key_order_follows_declaration(self, sample_config):
        from mosaic.mosaic_config import MosaicConfig

        data = MosaicConfig.from_dict(sample_config).to_dict()
        assert list(data) == ["originChain", "auxiliaryChains"]
        assert list(data["originChain"]) == ["chain", "contractAddresses"]
        assert list(data["auxiliaryChains"]["1405"]) == [
            "chainId",
            "bootNodes",
            "genesis",
            "contractAddresses",
        ]
        assert list(data["auxiliaryChains"]["1405"]["contractAddresses"]["auxiliary"]) == [
            "ostPrimeAddress",
            "anchorOrganizationAddress",
            "anchorAddress",
            "merklePatriciaLibAddress",
            "gatewayLibAddress",
            "messageBusAddress",
            "ostCoGatewayOrganizationAddress",
            "ostEIP20CogatewayAddress",
        ]

    def test_to_dict_matches_input(self, sample_config):
        from mosaic.mosaic_config import MosaicConfig

        assert MosaicConfig.from_dict(sample_config).to_dict() == sample_config

    def test_unset_scalars_omitted(self):
        from mosaic.mosaic_config import MosaicConfig

        assert MosaicConfig().to_dict() == {
            "originChain": {"contractAddresses": {}},
            "auxiliaryChains": {},
        }

    def test_nulls_inside_genesis_kept(self, sample_config):
        from mosaic.mosaic_config import MosaicConfig

        data = MosaicConfig.from_dict(sample_config).to_dict()
        assert data["auxiliaryChains"]["1405"]["genesis"]["nonce"] is None

    def test_to_json_uses_four_space_indent(self, sample_config):
        from mosaic.mosaic_config import MosaicConfig

        text = MosaicConfig.from_dict(sample_config).to_json()
        assert text.splitlines()[1] == '    "originChain": {'
        assert text.endswith("}\n")
        assert json.loads(text) == sample_config
