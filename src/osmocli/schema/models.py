from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ..errors import ParseError
from .schemas import TX_RESPONSE_SCHEMA, SchemaValidationError, validate_instance

# Event type the chain uses for fee/signature bookkeeping.
TX_EVENT_TYPE = "tx"


@dataclass(frozen=True)
class Attribute:
    key: str
    value: str

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Attribute":
        return cls(key=payload["key"], value=payload["value"])


@dataclass(frozen=True)
class Event:
    event_type: str
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Event":
        return cls(
            event_type=payload["type"],
            attributes=tuple(Attribute.from_dict(a) for a in payload["attributes"]),
        )


@dataclass(frozen=True)
class Fund:
    denom: str
    amount: str

    def to_dict(self) -> dict[str, Any]:
        return {"denom": self.denom, "amount": self.amount}


@dataclass(frozen=True)
class Message:
    """A MsgExecuteContract as it appears in the tx body."""
    type: str
    sender: str
    contract: str
    msg: Any
    funds: tuple[Fund, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Message":
        return cls(
            type=payload["@type"],
            sender=payload["sender"],
            contract=payload["contract"],
            msg=payload["msg"],
            funds=tuple(Fund(denom=f["denom"], amount=f["amount"]) for f in payload["funds"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "@type": self.type,
            "sender": self.sender,
            "contract": self.contract,
            # Contract message keys are sorted; the envelope keeps its field order.
            "msg": json.loads(json.dumps(self.msg, sort_keys=True)),
            "funds": [fund.to_dict() for fund in self.funds],
        }


@dataclass(frozen=True)
class Log:
    msg_index: int
    log: str
    events: tuple[Event, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Log":
        return cls(
            msg_index=payload["msg_index"],
            log=payload["log"],
            events=tuple(Event.from_dict(e) for e in payload["events"]),
        )


@dataclass(frozen=True)
class Body:
    messages: tuple[Message, ...]
    memo: str
    timeout_height: str
    extension_options: tuple[Any, ...] = ()
    non_critical_extension_options: tuple[Any, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Body":
        return cls(
            messages=tuple(Message.from_dict(m) for m in payload["messages"]),
            memo=payload["memo"],
            timeout_height=payload["timeout_height"],
            extension_options=tuple(payload["extension_options"]),
            non_critical_extension_options=tuple(payload["non_critical_extension_options"]),
        )


@dataclass(frozen=True)
class Tx:
    type: str
    body: Body

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Tx":
        return cls(type=payload["@type"], body=Body.from_dict(payload["body"]))


@dataclass(frozen=True)
class TransactionResponse:
    """Parsed output of ``osmosisd query tx <hash> --output=json``."""
    code: int
    codespace: str
    data: str
    events: tuple[Event, ...]
    tx: Tx
    logs: tuple[Log, ...]

    @classmethod
    def from_dict(cls, payload: Any) -> "TransactionResponse":
        try:
            validate_instance(payload, TX_RESPONSE_SCHEMA)
        except SchemaValidationError as exc:
            raise ParseError(
                "Failed to parse JSON: " + "; ".join(exc.errors),
                errors=exc.errors,
            ) from exc
        return cls(
            code=payload["code"],
            codespace=payload["codespace"],
            data=payload["data"],
            events=tuple(Event.from_dict(e) for e in payload["events"]),
            tx=Tx.from_dict(payload["tx"]),
            logs=tuple(Log.from_dict(log) for log in payload["logs"]),
        )

    @classmethod
    def from_json(cls, text: str) -> "TransactionResponse":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse JSON: {exc}") from exc
        return cls.from_dict(payload)

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.tx.body.messages

    @property
    def succeeded(self) -> bool:
        return self.code == 0


__all__ = [
    "Attribute",
    "Body",
    "Event",
    "Fund",
    "Log",
    "Message",
    "TX_EVENT_TYPE",
    "TransactionResponse",
    "Tx",
]
