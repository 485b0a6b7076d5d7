"""Query - Run a smart query against a registered contract."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..config import NodeConfig
from ..daemon import query_args, render_output, run_daemon
from ..errors import CommandError, OsmoCliError
from ..registry import ContractRegistry
from . import fail, read_message


@click.command()
@click.option("--contract", "contract_name", required=True, help="Name of the contract to query")
@click.option(
    "--json",
    "json_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file that contains the query message",
)
@click.pass_obj
def query(config: NodeConfig, contract_name: str, json_path: Path) -> None:
    """Query contract state through the daemon."""
    try:
        registry = ContractRegistry.from_path(config.contracts_path)
        address = registry.resolve_address(contract_name)
        query_json = read_message(json_path)
        result = run_daemon(config, query_args(config, address, query_json))
    except OsmoCliError as exc:
        fail(exc)

    click.echo(render_output(result))
    if not result.ok:
        sys.exit(CommandError.exit_code)
