"""Alternate-name aggregation."""

from __future__ import annotations

from collections.abc import Iterable

from railatlas._constants import NAME_KEY_PREFIX
from railatlas.ingestion.normalize import safe_str
from railatlas.models.station import StationName


def aggregate_names(records: Iterable[StationName]) -> dict[str, str]:
    """Build the ``name:<language>`` map for one station.

    The first record of a language gets ``name:<language>``; later ones get
    ``name:<language>_1``, ``name:<language>_2``, ... in input order.
    Records without a name or language are skipped.
    """
    names: dict[str, str] = {}
    seen: dict[str, int] = {}
    for record in records:
        name = safe_str(record.name)
        language = safe_str(record.language)
        if name is None or language is None:
            continue
        count = seen.get(language, 0)
        seen[language] = count + 1
        suffix = f"_{count}" if count else ""
        names[f"{NAME_KEY_PREFIX}{language}{suffix}"] = name
    return names
