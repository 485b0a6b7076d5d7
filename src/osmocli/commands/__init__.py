"""
Commands - One module per daemon-backed CLI command.

- execute:       Sign and broadcast a contract execute message
- query:         Run a smart query against a contract
- tx_events:     Fetch a transaction and summarize its events
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from ..errors import OsmoCliError


def fail(exc: OsmoCliError) -> NoReturn:
    """Report an error on stderr and exit with its code."""
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(exc.exit_code)


def read_message(path: Path) -> str:
    """Read a JSON message file and return its text for the daemon.

    Raises:
        OsmoCliError: If the file is unreadable or not valid JSON
    """
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise OsmoCliError(f"Failed to read JSON file {path}: {exc}") from exc
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        raise OsmoCliError(f"Invalid JSON in {path}: {exc}") from exc
    return text
