"""
Node configuration for osmocli.

Values come from, in increasing priority:
- the built-in defaults below (Osmosis testnet)
- ~/.osmocli/.env, loaded with python-dotenv
- OSMOCLI_* process environment variables
- command-line options
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError


OSMOCLI_DIR = Path.home() / ".osmocli"
OSMOCLI_ENV = OSMOCLI_DIR / ".env"

# ---- Defaults (Osmosis testnet 5) ----
DEFAULT_NODE = "https://rpc.osmotest5.osmosis.zone:443"
DEFAULT_CHAIN_ID = "osmo-test-5"
DEFAULT_WALLET = "wallet"
DEFAULT_CONTRACTS = "config/rover-osmosis5-contracts.json"
DEFAULT_DAEMON = "osmosisd"
DEFAULT_GAS_PRICES = "0.025uosmo"
DEFAULT_GAS_ADJUSTMENT = "1.3"
DEFAULT_KEYRING_BACKEND = "test"


@dataclass(frozen=True)
class NodeConfig:
    """
    Everything needed to talk to the daemon and annotate its output.

    Attributes:
        node: Tendermint RPC endpoint passed as --node
        chain_id: Chain ID passed as --chain-id for transactions
        wallet: Keyring key name passed as --from
        contracts_path: Registry file mapping contract names to addresses
        daemon: Daemon executable name or path
        gas_prices: Value for --gas-prices
        gas: Value for --gas
        gas_adjustment: Value for --gas-adjustment
        keyring_backend: Value for --keyring-backend
        timeout: Seconds to wait for the daemon (None waits forever)
    """
    node: str = DEFAULT_NODE
    chain_id: str = DEFAULT_CHAIN_ID
    wallet: str = DEFAULT_WALLET
    contracts_path: Path = Path(DEFAULT_CONTRACTS)
    daemon: str = DEFAULT_DAEMON
    gas_prices: str = DEFAULT_GAS_PRICES
    gas: str = "auto"
    gas_adjustment: str = DEFAULT_GAS_ADJUSTMENT
    keyring_backend: str = DEFAULT_KEYRING_BACKEND
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "NodeConfig":
        """Build a config from OSMOCLI_* environment variables."""
        env = os.environ
        return cls(
            node=env.get("OSMOCLI_NODE", DEFAULT_NODE),
            chain_id=env.get("OSMOCLI_CHAIN_ID", DEFAULT_CHAIN_ID),
            wallet=env.get("OSMOCLI_WALLET", DEFAULT_WALLET),
            contracts_path=Path(env.get("OSMOCLI_CONTRACTS", DEFAULT_CONTRACTS)),
            daemon=env.get("OSMOCLI_DAEMON", DEFAULT_DAEMON),
            timeout=parse_timeout(env.get("OSMOCLI_TIMEOUT")),
            **signing_settings_from_env(),
        )

    def with_overrides(self, **overrides: object) -> "NodeConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "contracts_path" in changes:
            changes["contracts_path"] = Path(str(changes["contracts_path"]))
        return replace(self, **changes)


def load_env_file(env_path: Optional[Path] = None) -> bool:
    """
    Load OSMOCLI_* settings from a .env file into the process environment.

    Variables already set in the environment are left untouched.

    Args:
        env_path: Path to .env file (default: ~/.osmocli/.env)

    Returns:
        True if the file existed and was loaded
    """
    env_path = env_path or OSMOCLI_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """
    Parse a daemon timeout in seconds; empty means no timeout.

    Raises:
        ConfigError: If the value is not a positive number
    """
    if value is None or not value.strip():
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigError(f"OSMOCLI_TIMEOUT must be a number of seconds, got {value!r}") from exc
    if not timeout > 0:
        raise ConfigError(f"OSMOCLI_TIMEOUT must be positive, got {value!r}")
    return timeout


def signing_settings_from_env() -> dict[str, str]:
    """Gas and keyring settings, which have no command-line option."""
    env = os.environ
    return {
        "gas_prices": env.get("OSMOCLI_GAS_PRICES", DEFAULT_GAS_PRICES),
        "gas_adjustment": env.get("OSMOCLI_GAS_ADJUSTMENT", DEFAULT_GAS_ADJUSTMENT),
        "keyring_backend": env.get("OSMOCLI_KEYRING_BACKEND", DEFAULT_KEYRING_BACKEND),
    }
