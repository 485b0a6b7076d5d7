"""
Daemon Adapter - Thin layer over the ``osmosisd`` CLI.

All chain interaction (signing, broadcasting, querying) is delegated to
the daemon. This module only builds argument lists, runs the process to
completion and hands back its captured output.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

from .config import NodeConfig
from .errors import CommandError
from .utils import maybe_parse_json, pretty_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaemonResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def execute_args(
    config: NodeConfig,
    contract_address: str,
    msg_json: str,
    amount: Optional[str] = None,
) -> list[str]:
    """Arguments for ``tx wasm execute`` (signed with the configured wallet)."""
    args = [
        "tx",
        "wasm",
        "execute",
        contract_address,
        msg_json,
        f"--gas-prices={config.gas_prices}",
        f"--gas={config.gas}",
        f"--gas-adjustment={config.gas_adjustment}",
        "-y",
        f"--keyring-backend={config.keyring_backend}",
        "--output=json",
        f"--from={config.wallet}",
        f"--node={config.node}",
        f"--chain-id={config.chain_id}",
    ]
    if amount:
        args.append(f"--amount={amount}")
    return args


def query_args(config: NodeConfig, contract_address: str, query_json: str) -> list[str]:
    """Arguments for ``query wasm contract-state smart``."""
    return [
        "query",
        "wasm",
        "contract-state",
        "smart",
        contract_address,
        query_json,
        "--output=json",
        f"--node={config.node}",
    ]


def tx_query_args(config: NodeConfig, tx_hash: str) -> list[str]:
    """Arguments for ``query tx <hash>``."""
    return [
        "query",
        "tx",
        tx_hash,
        "--output=json",
        f"--node={config.node}",
    ]


def run_daemon(config: NodeConfig, args: list[str]) -> DaemonResult:
    """
    Run the daemon and wait for it to exit.

    A non-zero exit status is not an error here; callers decide what to
    do with ``DaemonResult.ok``.

    Raises:
        CommandError: If the daemon is not installed or the timeout expires
    """
    if shutil.which(config.daemon) is None:
        raise CommandError(f"{config.daemon}: executable not found")

    cmd = [config.daemon, *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
            timeout=config.timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandError(
            f"{config.daemon} did not finish within {config.timeout}s"
        ) from exc

    logger.debug("%s exited with status %d", config.daemon, proc.returncode)
    return DaemonResult(proc.returncode, proc.stdout, proc.stderr)


def render_output(result: DaemonResult) -> str:
    """Pretty JSON (keys sorted) when stdout is JSON, otherwise whichever stream has text."""
    parsed = maybe_parse_json(result.stdout)
    if parsed is not None:
        return pretty_json(parsed, sort_keys=True)
    if result.stderr:
        return f"stderr:\n{result.stderr}"
    return f"stdout:\n{result.stdout}"
