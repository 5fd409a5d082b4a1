"""Station and station name models."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator, model_validator

from railatlas._constants import DEFAULT_STATION_STATUS, STATUS_CLOSED
from railatlas.ingestion.normalize import finite_float, parse_year
from railatlas.models._base import AtlasBaseModel


class Station(AtlasBaseModel):
    """A railway station at a fixed point.

    ``lat``/``lon`` must be finite numbers; no other plausibility check is
    applied.  ``current_status`` is free-form text from the source and is
    only interpreted for the manual ``"closed"`` override.
    """

    station_id: str
    name_primary: str = ""
    """Display name; falls back to ``station_id``."""
    name_latin: str | None = None
    lat: float
    lon: float
    country_code: str | None = None
    esr_code: str | None = None
    osm_node_id: str | None = None
    osm_way_id: str | None = None
    osm_relation_id: str | None = None
    wikidata_id: str | None = None
    wikipedia_ru: str | None = None
    parovoz_url: str | None = None
    railwayz_id: str | None = None
    current_status: str = DEFAULT_STATION_STATUS
    geometry_quality: str | None = None
    notes: str | None = None
    created_at: str | None = None
    """Record creation date, used as the opening year when no open event exists."""
    updated_at: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_primary_name(cls, values: Any) -> Any:
        if isinstance(values, dict) and not values.get("name_primary") and values.get("station_id"):
            values = dict(values)
            values["name_primary"] = values["station_id"]
        return values

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _finite_coordinate(cls, value: Any) -> float:
        parsed = finite_float(value)
        if parsed is None:
            raise ValueError(f"coordinate must be a finite number, got {value!r}")
        return parsed

    @field_validator(
        "station_id",
        "osm_node_id",
        "osm_way_id",
        "osm_relation_id",
        "esr_code",
        "railwayz_id",
        mode="before",
    )
    @classmethod
    def _ids_as_text(cls, value: Any) -> Any:
        # Numeric-looking identifiers come back as ints from columnar sources.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def created_at_year(self) -> int | None:
        return parse_year(self.created_at)

    @property
    def is_marked_closed(self) -> bool:
        """Whether ``current_status`` is exactly ``"closed"``."""
        return self.current_status == STATUS_CLOSED


class StationName(AtlasBaseModel):
    """An alternate name of a station in one language.

    ``valid_from``/``valid_to`` are carried through but do not take part
    in year resolution.
    """

    station_id: str
    name: str
    language: str
    valid_from: str | None = None
    valid_to: str | None = None
    name_type: str | None = None
    source_id: str | None = None
    notes: str | None = None
