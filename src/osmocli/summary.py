"""
Event Summarizer - Compact one-line-per-event rendering of tx events.

Each non-bookkeeping event becomes a line of the form

    --> wasm( _contract_address: osmo1... (credit-manager), action: deposit )

Addresses that appear in the contract registry are annotated with their
name. The summarizer does no I/O of its own; name lookups go through the
injected ``lookup`` callable.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .schema.models import TX_EVENT_TYPE, Attribute, Event
from .utils import decode_attribute, lossy_text

NameLookup = Callable[[str], Optional[str]]


def _attribute_text(attribute: Attribute, decode: bool) -> tuple[str, str]:
    if not decode:
        return attribute.key, attribute.value
    key = lossy_text(decode_attribute(attribute.key))
    value = lossy_text(decode_attribute(attribute.value))
    return key, value


def annotate(value: str, lookup: Optional[NameLookup]) -> str:
    """Append ``(<contract name>)`` to a value that is a known address."""
    if lookup is None:
        return value
    name = lookup(value)
    if name:
        return f"{value} ({name})"
    return value


def summarize_event(event: Event, decode: bool, lookup: Optional[NameLookup] = None) -> str:
    fragments = []
    for attribute in event.attributes:
        key, value = _attribute_text(attribute, decode)
        fragments.append(f"{key}: {annotate(value, lookup)}")
    return f"--> {event.event_type}( " + ", ".join(fragments) + " )\n"


def summarize_events(
    events: Iterable[Event],
    decode: bool,
    lookup: Optional[NameLookup] = None,
) -> str:
    """
    Render events as a text block, skipping the ``tx`` bookkeeping events.

    Args:
        events: Events in emission order
        decode: Base64-decode attribute keys and values first
        lookup: Maps an address to a contract name (None disables annotation)

    Returns:
        One line per retained event, or "" when none are retained
    """
    return "".join(
        summarize_event(event, decode, lookup)
        for event in events
        if event.event_type != TX_EVENT_TYPE
    )
