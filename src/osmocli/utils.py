from __future__ import annotations

import base64
import binascii
import json
from typing import Any


def decode_attribute(text: str) -> bytes:
    """Decode a base64 event attribute, or return its UTF-8 bytes unchanged.

    Attribute keys and values are base64 on some daemon versions and plain
    text on others, with no marker telling them apart. Decoding is strict
    (alphabet and padding are checked) and never raises.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return text.encode("utf-8", errors="surrogatepass")


def lossy_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def pretty_json(value: Any, sort_keys: bool = False) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, sort_keys=sort_keys)


def maybe_parse_json(text: str) -> Any:
    text = text.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None
