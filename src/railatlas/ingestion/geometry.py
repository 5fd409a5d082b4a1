"""Path geometry normalization.

Segment paths arrive in several encodings depending on where a table was
exported from:

* JSON text (a CSV cell, a document column)
* a GeoJSON-style document: ``Feature``, ``FeatureCollection`` (the first
  feature is used) or a bare geometry carrying ``coordinates``
* a flat list of pairs, each pair being a 2-element sequence or a keyed
  record (``{"f0": .., "f1": ..}`` from columnar struct exports, or
  ``{"lat": .., "lon": ..}``)

:func:`classify_geometry` names the variant and :func:`normalize_geometry`
reduces any of them to a list of finite ``(a, b)`` float pairs.  Pairs are
kept in their source axis order; nothing is swapped.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from railatlas.ingestion.normalize import finite_float

_logger = logging.getLogger(__name__)

Coordinate = tuple[float, float]

_KEYED_PAIR_FIELDS: tuple[tuple[str, str], ...] = (("f0", "f1"), ("lat", "lon"))


class GeometryShape(enum.Enum):
    """Accepted top-level geometry encodings."""

    TEXT = "text"
    DOCUMENT = "document"
    PAIR_LIST = "pair_list"
    UNRECOGNIZED = "unrecognized"


def classify_geometry(raw: Any) -> GeometryShape:
    """Return which input variant *raw* is."""
    if isinstance(raw, (str, bytes, bytearray)):
        return GeometryShape.TEXT
    if isinstance(raw, Mapping):
        return GeometryShape.DOCUMENT
    if isinstance(raw, Sequence):
        return GeometryShape.PAIR_LIST
    return GeometryShape.UNRECOGNIZED


def coerce_pair(item: Any) -> Coordinate | None:
    """Coerce a single coordinate element to a finite pair, or ``None``."""
    if isinstance(item, Mapping):
        for first_key, second_key in _KEYED_PAIR_FIELDS:
            if first_key in item and second_key in item:
                first, second = item[first_key], item[second_key]
                break
        else:
            return None
    elif isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray)):
        if len(item) != 2:
            return None
        first, second = item[0], item[1]
    else:
        return None

    a = finite_float(first)
    b = finite_float(second)
    if a is None or b is None:
        return None
    return (a, b)


def _pairs_from_list(items: Sequence[Any]) -> list[Coordinate]:
    pairs: list[Coordinate] = []
    for position, item in enumerate(items):
        pair = coerce_pair(item)
        if pair is None:
            _logger.debug("Dropping malformed coordinate at index %d: %r", position, item)
            continue
        pairs.append(pair)
    return pairs


def _coordinates_from_document(document: Mapping[str, Any]) -> Any:
    """Unwrap a feature collection / feature / geometry to its coordinates."""
    features = document.get("features")
    if isinstance(features, Sequence) and not isinstance(features, (str, bytes, bytearray)):
        if not features or not isinstance(features[0], Mapping):
            return None
        document = features[0]

    geometry = document.get("geometry")
    if isinstance(geometry, Mapping):
        document = geometry

    return document.get("coordinates")


def _decode_text(raw: str | bytes | bytearray) -> Any:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else raw
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        _logger.debug("Geometry text is not valid JSON: %.80s", text)
        return None


def normalize_geometry(raw: Any) -> list[Coordinate]:
    """Normalize any accepted geometry encoding to an ordered pair list.

    Elements that cannot be coerced to two finite numbers are dropped
    individually.  An unrecognized top-level shape (including text that
    does not decode, or decodes to another string) yields ``[]``.
    """
    shape = classify_geometry(raw)
    if shape is GeometryShape.TEXT:
        raw = _decode_text(raw)
        shape = classify_geometry(raw)
        if shape is GeometryShape.TEXT:
            return []

    if shape is GeometryShape.DOCUMENT:
        raw = _coordinates_from_document(raw)
        shape = classify_geometry(raw)

    if shape is GeometryShape.PAIR_LIST:
        return _pairs_from_list(raw)

    if raw is not None:
        _logger.debug("Unrecognized geometry shape: %s", type(raw).__name__)
    return []
