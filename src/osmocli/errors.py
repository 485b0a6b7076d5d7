"""
Error taxonomy for osmocli.

Library code raises these; only the click commands turn them into
messages and process exit codes.
"""

from __future__ import annotations


class OsmoCliError(RuntimeError):
    exit_code: int = 1


class NotFoundError(OsmoCliError):
    """Contract name is not present in the registry."""

    exit_code = 2


class ParseError(OsmoCliError):
    """Daemon output is not JSON or does not match the expected shape."""

    exit_code = 3

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class EmptyMessagesError(OsmoCliError):
    exit_code = 4


class EmptyLogsError(OsmoCliError):
    exit_code = 5


class CommandError(OsmoCliError):
    """The daemon could not be run or exited non-zero."""

    exit_code = 6

    def __init__(self, stderr: str, returncode: int | None = None) -> None:
        super().__init__(stderr)
        self.stderr = stderr
        self.returncode = returncode


class RegistryError(OsmoCliError):
    exit_code = 7


class ConfigError(OsmoCliError):
    """An OSMOCLI_* setting has an invalid value."""

    exit_code = 8
