"""Helpers for carving values out of inline script text."""
from __future__ import annotations

import json
import re
from typing import Any, Optional, Pattern

from .errors import DecodeError


def search_group(pattern: Pattern[str], text: str, group: int = 1) -> str:
    """Return a capture group or an empty string when the pattern misses."""
    match = pattern.search(text)
    if not match:
        return ""
    return match.group(group) or ""


def decode_json(payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Malformed JSON payload: {exc}") from exc


def decode_json_island(pattern: Pattern[str], text: str) -> Optional[Any]:
    """Decode the JSON object captured by ``pattern``'s first group.

    Returns ``None`` when the pattern does not match and raises
    ``DecodeError`` when it matches something that is not valid JSON.
    """
    payload = search_group(pattern, text)
    if not payload:
        return None
    return decode_json(payload)


def json_str(data: Any, *keys: str) -> str:
    """Walk nested mappings and return a string leaf, or ``""``."""
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return ""
        value = value.get(key)
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def substitute_tokens(template: re.Match, **tokens: str) -> str:
    """Interleave the literal pieces captured by ``template`` with ``tokens``.

    The match's groups are the literal segments found between the token
    references, in order; ``tokens`` supplies the values placed between them.
    """
    pieces = list(template.groups())
    values = list(tokens.values())
    if len(pieces) != len(values) + 1:
        raise DecodeError("Template pieces and tokens do not line up")
    parts = [pieces[0]]
    for value, piece in zip(values, pieces[1:]):
        parts.append(value)
        parts.append(piece)
    return "".join(parts)
