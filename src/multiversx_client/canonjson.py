"""
Canonical JSON

The signable form of a transaction is its field mapping dumped in insertion
order with compact separators. Characters such as ``<``, ``>`` and ``&`` are
emitted literally; escaping them would change the signed bytes.
"""

import json
from typing import Any, Mapping

# Line/paragraph separators are always escaped by the reference encoder.
_ALWAYS_ESCAPED = {
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def dumps_ordered(obj: Mapping[str, Any]) -> str:
    """
    Encode a mapping as canonical JSON, keeping its key order.

    No whitespace, no HTML escaping, non-ASCII characters kept as is.

    Args:
        obj: Mapping to encode; keys are emitted in iteration order

    Returns:
        Canonical JSON string
    """
    text = json.dumps(obj, separators=(',', ':'), ensure_ascii=False, sort_keys=False)
    for raw, escaped in _ALWAYS_ESCAPED.items():
        text = text.replace(raw, escaped)
    return text


def dumps_ordered_bytes(obj: Mapping[str, Any]) -> bytes:
    """UTF-8 bytes of :func:`dumps_ordered`; these are the bytes that get signed."""
    return dumps_ordered(obj).encode("utf-8")
