"""Segment model."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from railatlas.ingestion.geometry import Coordinate, normalize_geometry
from railatlas.ingestion.normalize import safe_str
from railatlas.models._base import AtlasBaseModel


class Segment(AtlasBaseModel):
    """A track segment between two stations.

    ``geometry`` accepts any encoding :func:`normalize_geometry` accepts
    and is stored as the normalized pair sequence.
    """

    segment_id: str
    from_station_id: str
    to_station_id: str
    geometry: tuple[Coordinate, ...] = ()
    geometry_source: str | None = None
    geometry_quality: str | None = None
    is_current: bool | None = None
    notes: str | None = None

    @field_validator("geometry", mode="before")
    @classmethod
    def _normalize_geometry(cls, value: Any) -> tuple[Coordinate, ...]:
        return tuple(normalize_geometry(value))

    @field_validator("is_current", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        text = safe_str(value)
        if text is None:
            return None
        if isinstance(value, str):
            return text.lower() in {"1", "true", "yes", "y", "t"}
        return value
