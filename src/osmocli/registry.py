"""
Contract Registry - Maps human contract names to on-chain addresses.

The registry file is a flat JSON object:

    {"credit-manager": "osmo1...", "oracle": "osmo1...", ...}

Entries are kept in document order so that reverse lookups are
deterministic when two names share an address (the first one wins).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from .errors import NotFoundError, RegistryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractRegistry:
    pairs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ContractRegistry":
        """Build a registry, dropping entries whose address is not a string."""
        pairs = []
        for name, address in mapping.items():
            if isinstance(address, str):
                pairs.append((name, address))
            else:
                logger.debug("Skipping registry entry %r: address is not a string", name)
        return cls(tuple(pairs))

    @classmethod
    def from_path(cls, path: Path) -> "ContractRegistry":
        """
        Load the registry from a JSON file.

        Args:
            path: Registry file location

        Returns:
            ContractRegistry in document order

        Raises:
            RegistryError: If the file is missing, unreadable, or not a JSON object
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as exc:
            raise RegistryError(f"Unable to read contract registry {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RegistryError(f"Contract registry {path} is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise RegistryError(f"Contract registry {path} must be a JSON object")

        registry = cls.from_mapping(payload)
        logger.debug("Loaded %d contracts from %s", len(registry), path)
        return registry

    def resolve_address(self, name: str) -> str:
        """Return the address registered under ``name``.

        Raises:
            NotFoundError: If no contract with that name exists
        """
        for entry_name, address in self.pairs:
            if entry_name == name:
                return address
        raise NotFoundError(f"Invalid contract name: {name!r} is not in the registry")

    def resolve_name(self, address: str) -> Optional[str]:
        """Return the first name registered for ``address``, or None."""
        for name, entry_address in self.pairs:
            if entry_address == address:
                return name
        return None

    def entries(self) -> list[tuple[str, str]]:
        return list(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)
