"""Shared fixtures: a contract registry file and a realistic tx response."""

from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any, Callable

import pytest


REGISTRY = {
    "vault": "osmo1abc",
    "oracle": "osmo1oracle",
}

SENDER = "osmo1sender"


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def encoded_attribute(key: str, value: str) -> dict[str, Any]:
    return {"key": b64(key), "value": b64(value), "index": True}


def make_tx_response(**overrides: Any) -> dict[str, Any]:
    """Build a successful MsgExecuteContract query-tx response."""
    payload: dict[str, Any] = {
        "height": "4821",
        "txhash": "5A1EC0DE",
        "code": 0,
        "codespace": "",
        "data": "12330A2C2F636F736D7761736D2E7761736D2E76312E4D736745786563757465436F6E7472616374526573706F6E7365",
        "events": [
            {
                "type": "coin_spent",
                "attributes": [
                    encoded_attribute("spender", SENDER),
                    encoded_attribute("amount", "2500uosmo"),
                ],
            },
            {
                "type": "tx",
                "attributes": [encoded_attribute("fee", "2500uosmo")],
            },
            {
                "type": "wasm",
                "attributes": [
                    encoded_attribute("_contract_address", "osmo1abc"),
                    encoded_attribute("action", "deposit"),
                ],
            },
        ],
        "tx": {
            "@type": "/cosmos.tx.v1beta1.Tx",
            "body": {
                "messages": [
                    {
                        "@type": "/cosmwasm.wasm.v1.MsgExecuteContract",
                        "sender": SENDER,
                        "contract": "osmo1abc",
                        "msg": {"deposit": {}},
                        "funds": [{"denom": "uosmo", "amount": "1000"}],
                    }
                ],
                "memo": "",
                "timeout_height": "0",
                "extension_options": [],
                "non_critical_extension_options": [],
            },
        },
        "logs": [
            {
                "msg_index": 0,
                "log": "",
                "events": [
                    {
                        "type": "message",
                        "attributes": [
                            {"key": "action", "value": "/cosmwasm.wasm.v1.MsgExecuteContract"},
                            {"key": "sender", "value": SENDER},
                        ],
                    },
                    {
                        "type": "execute",
                        "attributes": [{"key": "_contract_address", "value": "osmo1abc"}],
                    },
                ],
            }
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "contracts.json"
    path.write_text(json.dumps(REGISTRY), encoding="utf-8")
    return path


@pytest.fixture()
def tx_response() -> Callable[..., dict[str, Any]]:
    return make_tx_response


@pytest.fixture()
def tx_json(tx_response: Callable[..., dict[str, Any]]) -> str:
    return json.dumps(tx_response(), indent=2) + "\n"
