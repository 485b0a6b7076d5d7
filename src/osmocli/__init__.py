__all__ = [
    # Config
    "NodeConfig",
    "load_env_file",
    # Errors
    "OsmoCliError",
    "NotFoundError",
    "ParseError",
    "EmptyMessagesError",
    "EmptyLogsError",
    "CommandError",
    "RegistryError",
    # Registry
    "ContractRegistry",
    # Model
    "Attribute",
    "Event",
    "Log",
    "Message",
    "TransactionResponse",
    # Pipeline
    "decode_attribute",
    "lossy_text",
    "summarize_events",
    "TxReport",
    "build_tx_report",
    "render_tx_report",
    # Daemon
    "DaemonResult",
    "run_daemon",
]

from .config import NodeConfig, load_env_file
from .daemon import DaemonResult, run_daemon
from .errors import (
    CommandError,
    EmptyLogsError,
    EmptyMessagesError,
    NotFoundError,
    OsmoCliError,
    ParseError,
    RegistryError,
)
from .registry import ContractRegistry
from .report import TxReport, build_tx_report, render_tx_report
from .schema.models import Attribute, Event, Log, Message, TransactionResponse
from .summary import summarize_events
from .utils import decode_attribute, lossy_text
