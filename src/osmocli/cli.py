"""
osmocli CLI

Command-line wrapper around osmosisd for CosmWasm contracts.

Commands:
  execute        - Execute a contract message (signed by the configured wallet)
  query          - Smart-query a contract
  get-tx-events  - Summarize the events of a transaction
  contracts      - List the contract registry
  info           - Show the effective configuration
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import (
    DEFAULT_CHAIN_ID,
    DEFAULT_CONTRACTS,
    DEFAULT_DAEMON,
    DEFAULT_NODE,
    DEFAULT_WALLET,
    NodeConfig,
    load_env_file,
    signing_settings_from_env,
)
from .errors import OsmoCliError
from .registry import ContractRegistry


# ============ Constants ============

VERSION = "0.1.0"


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="osmocli")
@click.option("--node", envvar="OSMOCLI_NODE", default=DEFAULT_NODE, show_envvar=True, help="Node RPC endpoint")
@click.option("--chain-id", envvar="OSMOCLI_CHAIN_ID", default=DEFAULT_CHAIN_ID, show_envvar=True, help="Chain ID")
@click.option(
    "--wallet",
    envvar="OSMOCLI_WALLET",
    default=DEFAULT_WALLET,
    show_envvar=True,
    help="Keyring key used to sign",
)
@click.option(
    "--contracts",
    "contracts_path",
    envvar="OSMOCLI_CONTRACTS",
    default=DEFAULT_CONTRACTS,
    show_envvar=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Contract registry JSON file",
)
@click.option("--daemon", envvar="OSMOCLI_DAEMON", default=DEFAULT_DAEMON, show_envvar=True, help="Daemon executable")
@click.option(
    "--timeout",
    envvar="OSMOCLI_TIMEOUT",
    default=None,
    show_envvar=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds to wait for the daemon",
)
@click.option("--verbose", "-v", is_flag=True, help="Log daemon invocations to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    node: str,
    chain_id: str,
    wallet: str,
    contracts_path: Path,
    daemon: str,
    timeout: Optional[float],
    verbose: bool,
) -> None:
    """osmocli — CosmWasm contract client for Osmosis."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    ctx.obj = NodeConfig(
        node=node,
        chain_id=chain_id,
        wallet=wallet,
        contracts_path=contracts_path,
        daemon=daemon,
        timeout=timeout,
        **signing_settings_from_env(),
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Daemon Commands ============

from .commands.execute import execute
from .commands.query import query
from .commands.tx_events import get_tx_events

cli.add_command(execute)
cli.add_command(query)
cli.add_command(get_tx_events)


# ============ Registry ============


@cli.command()
@click.pass_obj
def contracts(config: NodeConfig) -> None:
    """List registered contracts."""
    try:
        registry = ContractRegistry.from_path(config.contracts_path)
    except OsmoCliError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    if not len(registry):
        click.echo("No contracts registered.")
        return

    width = max(len(name) for name, _ in registry)
    for name, address in registry:
        click.echo(f"{name.ljust(width)}  {address}")


# ============ Info ============


@cli.command()
@click.pass_obj
def info(config: NodeConfig) -> None:
    """Show the effective configuration."""
    click.secho(f"osmocli v{VERSION}", bold=True)
    click.echo()

    rows = [
        ("Node", config.node),
        ("Chain ID", config.chain_id),
        ("Wallet", config.wallet),
        ("Daemon", config.daemon),
        ("Gas prices", config.gas_prices),
        ("Keyring", config.keyring_backend),
        ("Timeout", f"{config.timeout}s" if config.timeout else "none"),
    ]
    for label, value in rows:
        click.echo(click.style(f"  {label + ':':<12}", dim=True) + value)

    try:
        registry = ContractRegistry.from_path(config.contracts_path)
        contracts_text = f"{config.contracts_path} ({len(registry)} contracts)"
    except OsmoCliError:
        contracts_text = click.style(f"{config.contracts_path} (not readable)", fg="yellow")
    click.echo(click.style(f"  {'Contracts:':<12}", dim=True) + contracts_text)


# ============ Entry Points ============


def main() -> None:
    """osmocli entry point."""
    # Ensure UTF-8 output on Windows (summaries may contain U+FFFD)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    load_env_file()
    cli()


if __name__ == "__main__":
    main()
