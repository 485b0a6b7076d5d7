"""
Transaction report - Turns a ``query tx`` daemon result into readable text.

The whole report is built before anything is printed, so a parse
failure or a missing message never leaves half a report on stdout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .daemon import DaemonResult
from .errors import CommandError, EmptyLogsError, EmptyMessagesError
from .schema.models import Message, TransactionResponse
from .summary import NameLookup, summarize_events
from .utils import pretty_json


@dataclass(frozen=True)
class TxReport:
    raw: str
    sender: str
    messages: tuple[Message, ...]
    events_summary: str
    logs_summary: str


def build_tx_report(result: DaemonResult, lookup: Optional[NameLookup] = None) -> TxReport:
    """
    Parse a tx query result and summarize it.

    Top-level events are base64-decoded; log events are shown as-is
    because the daemon already renders them as text.

    Raises:
        CommandError: If the daemon failed (stderr is carried verbatim)
        ParseError: If stdout is not a well-formed tx response
        EmptyMessagesError: If the transaction has no messages
        EmptyLogsError: If the transaction has no logs
    """
    if not result.ok:
        raise CommandError(result.stderr, returncode=result.returncode)

    response = TransactionResponse.from_json(result.stdout)

    messages = response.messages
    if not messages:
        raise EmptyMessagesError("Transaction contains no messages")
    if not response.logs:
        raise EmptyLogsError(
            f"Transaction has no logs (code {response.code}"
            + (f", codespace {response.codespace}" if response.codespace else "")
            + ")"
        )

    return TxReport(
        raw=result.stdout,
        sender=messages[0].sender,
        messages=messages,
        events_summary=summarize_events(response.events, True, lookup),
        logs_summary=summarize_events(response.logs[0].events, False, lookup),
    )


def render_tx_report(report: TxReport) -> str:
    lines = [
        report.raw,
        "--> Sender <--",
        report.sender,
        "--> Messages <--",
    ]
    for message in report.messages:
        lines.append(f"Message:\n{pretty_json(message.to_dict())}")
    lines += [
        "--> Events <--",
        report.events_summary,
        "--> Logs <--",
        report.logs_summary,
    ]
    return "\n".join(lines) + "\n"
