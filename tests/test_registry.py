"""Tests for the contract registry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from osmocli.errors import NotFoundError, RegistryError
from osmocli.registry import ContractRegistry


class TestLookup:
    """Forward and reverse lookups."""

    def test_resolve_both_ways(self) -> None:
        registry = ContractRegistry.from_mapping({"vault": "osmo1abc"})
        assert registry.resolve_name("osmo1abc") == "vault"
        assert registry.resolve_name("osmo1xyz") is None
        assert registry.resolve_address("vault") == "osmo1abc"

    def test_missing_name_raises(self) -> None:
        registry = ContractRegistry.from_mapping({"vault": "osmo1abc"})
        with pytest.raises(NotFoundError, match="missing"):
            registry.resolve_address("missing")

    def test_duplicate_address_first_name_wins(self) -> None:
        registry = ContractRegistry.from_mapping(
            {"red-bank": "osmo1dup", "red-bank-v2": "osmo1dup", "oracle": "osmo1o"}
        )
        assert registry.resolve_name("osmo1dup") == "red-bank"

    def test_non_string_addresses_are_skipped(self) -> None:
        registry = ContractRegistry.from_mapping({"vault": "osmo1abc", "params": {"a": 1}})
        assert len(registry) == 1
        with pytest.raises(NotFoundError):
            registry.resolve_address("params")

    def test_empty_registry(self) -> None:
        registry = ContractRegistry()
        assert registry.resolve_name("osmo1abc") is None
        assert registry.entries() == []


class TestFromPath:
    """Loading the registry file."""

    def test_loads_in_document_order(self, tmp_path: Path) -> None:
        path = tmp_path / "contracts.json"
        path.write_text('{"zeta": "osmo1z", "alpha": "osmo1a"}', encoding="utf-8")
        registry = ContractRegistry.from_path(path)
        assert registry.entries() == [("zeta", "osmo1z"), ("alpha", "osmo1a")]
        assert list(registry) == registry.entries()

    def test_fixture_file(self, registry_file: Path) -> None:
        registry = ContractRegistry.from_path(registry_file)
        assert registry.resolve_address("oracle") == "osmo1oracle"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RegistryError, match="Unable to read"):
            ContractRegistry.from_path(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "contracts.json"
        path.write_text("{vault: osmo1abc", encoding="utf-8")
        with pytest.raises(RegistryError, match="not valid JSON"):
            ContractRegistry.from_path(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "contracts.json"
        path.write_text(json.dumps(["osmo1abc"]), encoding="utf-8")
        with pytest.raises(RegistryError, match="JSON object"):
            ContractRegistry.from_path(path)
