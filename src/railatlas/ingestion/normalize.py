"""Normalization helpers.

Tolerant parsing and placeholder handling for raw source cells.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

# Year or year-month dates, as written for coarse ``date_precision`` values.
_PARTIAL_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(result):
        return None
    return result


def finite_float(value: Any) -> float | None:
    """Like :func:`safe_float` but also rejects ``inf``/``-inf``."""
    result = safe_float(value)
    if result is None or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = finite_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def parse_year(value: Any) -> int | None:
    """Return the calendar year of a date-like value, or ``None``.

    Accepts :class:`~datetime.date`/:class:`~datetime.datetime` objects,
    ISO 8601 dates and timestamps, and the partial forms ``YYYY`` and
    ``YYYY-MM``.  Anything else is treated as unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return value.year
    if isinstance(value, int):
        return value

    text = safe_str(value)
    if text is None:
        return None

    match = _PARTIAL_DATE_RE.match(text)
    if match is not None:
        month = match.group(2)
        if month is not None and not 1 <= int(month) <= 12:
            return None
        return int(match.group(1))

    try:
        return datetime.fromisoformat(text).year
    except ValueError:
        return None
