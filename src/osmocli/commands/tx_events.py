"""
Tx Events - Fetch a transaction and print a readable summary.

Output, in order: the raw JSON, the sender, each message, the decoded
top-level events and the events of the first log. Registered contract
addresses are annotated with their names.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from ..config import NodeConfig
from ..daemon import run_daemon, tx_query_args
from ..errors import CommandError, OsmoCliError, RegistryError
from ..registry import ContractRegistry
from ..report import build_tx_report, render_tx_report
from ..summary import NameLookup
from . import fail

logger = logging.getLogger(__name__)


def _load_lookup(config: NodeConfig) -> Optional[NameLookup]:
    """Name lookup for address labels, or None when the registry cannot be read."""
    try:
        return ContractRegistry.from_path(config.contracts_path).resolve_name
    except RegistryError as exc:
        logger.warning("%s; contract addresses will not be labelled", exc)
        return None


@click.command("get-tx-events")
@click.option("--tx", "tx_hash", required=True, help="Transaction hash")
@click.pass_obj
def get_tx_events(config: NodeConfig, tx_hash: str) -> None:
    """Summarize the events of a transaction."""
    try:
        result = run_daemon(config, tx_query_args(config, tx_hash))
        lookup = _load_lookup(config) if result.ok else None
        report = build_tx_report(result, lookup)
    except CommandError as exc:
        click.secho(f"Command execution failed: {exc.stderr}", fg="red", err=True)
        sys.exit(exc.exit_code)
    except OsmoCliError as exc:
        fail(exc)

    click.echo(render_tx_report(report), nl=False)
