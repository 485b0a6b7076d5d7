"""
Execute - Sign and broadcast a CosmWasm execute message.

The contract is given by name and resolved through the contract
registry; the message body is read from a JSON file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ..config import NodeConfig
from ..daemon import execute_args, render_output, run_daemon
from ..errors import CommandError, OsmoCliError
from ..registry import ContractRegistry
from . import fail, read_message


@click.command()
@click.option("--contract", "contract_name", required=True, help="Name of the contract to execute")
@click.option(
    "--json",
    "json_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file that contains the execute message",
)
@click.option("--amount", default=None, help="Funds to send with the tx (e.g. 1000uosmo)")
@click.pass_obj
def execute(
    config: NodeConfig,
    contract_name: str,
    json_path: Path,
    amount: Optional[str],
) -> None:
    """Execute a contract message through the daemon."""
    try:
        registry = ContractRegistry.from_path(config.contracts_path)
        address = registry.resolve_address(contract_name)
        msg_json = read_message(json_path)
        result = run_daemon(config, execute_args(config, address, msg_json, amount))
    except OsmoCliError as exc:
        fail(exc)

    click.echo(render_output(result))
    if not result.ok:
        sys.exit(CommandError.exit_code)
