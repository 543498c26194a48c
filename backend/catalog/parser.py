"""
Lenient value parsers shared by the providers.

Every parser returns the type's zero value (``0``, ``0.0`` or ``None``) when
the input cannot be understood, so callers can treat "unparseable" the same
as "absent".
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateparser

_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+(?:\.\d+)?")
_CJK_DATE_RE = re.compile(r"(\d{4})\s*[年/.\-]\s*(\d{1,2})\s*[月/.\-]\s*(\d{1,2})\s*日?")
_ISO_DURATION_RE = re.compile(
    r"^P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+(?:\.\d+)?)S)?$", re.IGNORECASE
)
_CLOCK_RE = re.compile(r"^(\d+):(\d{1,2})(?::(\d{1,2}))?$")
_MINUTES_RE = re.compile(r"(\d+)\s*(?:分|min)", re.IGNORECASE)
_DEFAULT_DATE = datetime(1900, 1, 1)


def parse_int(value: Optional[str]) -> int:
    if not value:
        return 0
    match = _INT_RE.search(value.replace(",", ""))
    if not match:
        return 0
    try:
        return int(match.group(0))
    except ValueError:
        return 0


def parse_score(value: Optional[str]) -> float:
    if not value:
        return 0.0
    match = _FLOAT_RE.search(value)
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except ValueError:
        return 0.0


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse ISO, slash or ``YYYY年MM月DD日`` dates, returning ``None`` on failure."""

    if not value or not value.strip():
        return None
    text = value.strip()

    match = _CJK_DATE_RE.search(text)
    if match:
        try:
            return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        except ValueError:
            return None

    try:
        return dateparser.parse(text, default=_DEFAULT_DATE).date()
    except (ValueError, OverflowError):
        return None


def parse_runtime(value: Optional[str]) -> int:
    """Return a runtime in whole minutes.

    Accepts ISO 8601 durations (``PT1H2M``), clock strings (``01:02:03`` or
    ``62:03``) and minute counts such as ``120分`` or ``120 min``.
    """

    if not value or not value.strip():
        return 0
    text = value.strip()

    match = _ISO_DURATION_RE.match(text)
    if match and any(match.groups()):
        days, hours, minutes, seconds = match.groups()
        total = (
            int(days or 0) * 86400
            + int(hours or 0) * 3600
            + int(minutes or 0) * 60
            + float(seconds or 0)
        )
        return int(total // 60)

    match = _CLOCK_RE.match(text)
    if match:
        first, second, third = match.groups()
        if third is None:
            return int(first)
        return int(first) * 60 + int(second)

    match = _MINUTES_RE.search(text)
    if match:
        return int(match.group(1))

    if text.isdigit():
        return int(text)
    return 0
