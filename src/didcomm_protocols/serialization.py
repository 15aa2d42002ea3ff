"""JSON text forms used on the wire."""

import json
from typing import Any


def compact_json(value: Any) -> str:
    """Compact JSON, non-ASCII kept as-is; used for header values and base64 payloads."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)
