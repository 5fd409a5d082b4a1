"""Lifecycle event model."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from railatlas.ingestion.normalize import parse_year, safe_str
from railatlas.models._base import AtlasBaseModel, AtlasEnum


class EventType(AtlasEnum):
    """Kind of lifecycle transition an event asserts."""

    UNKNOWN = "unknown"
    STATION_OPEN = "station_open"
    STATION_CLOSE = "station_close"
    SEGMENT_OPEN = "segment_open"
    SEGMENT_CLOSE = "segment_close"
    ELECTRIFICATION = "electrification"
    GAUGE_CHANGE = "gauge_change"


class OwnerKind(AtlasEnum):
    UNKNOWN = "unknown"
    STATION = "station"
    SEGMENT = "segment"


class _Owner(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str
    entity_id: str

    @field_validator("entity_id")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        entity_id = value.strip()
        if not entity_id:
            raise ValueError("owner entity_id must be non-empty")
        return entity_id

    @property
    def key(self) -> tuple[OwnerKind, str]:
        return (OwnerKind(self.kind), self.entity_id)


class StationOwner(_Owner):
    kind: Literal["station"] = "station"


class SegmentOwner(_Owner):
    kind: Literal["segment"] = "segment"


EventOwner = Annotated[StationOwner | SegmentOwner, Field(discriminator="kind")]
"""The single entity an event belongs to."""


class LifecycleEvent(AtlasBaseModel):
    """A dated fact asserting a state transition for one entity.

    Source rows carry the owner as two columns, ``station_id`` and
    ``segment_id``; exactly one of them must be filled.  They are folded
    into :attr:`owner` during validation.
    """

    event_id: str
    event_type: EventType = EventType.UNKNOWN
    date: str | None = None
    """Raw date text; see :attr:`year`."""
    date_precision: str | None = None
    owner: EventOwner
    line_id: str | None = None
    description: str | None = None
    source_id: str | None = None
    source_page: str | None = None
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_owner_columns(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "owner" in values:
            return values
        station_id = safe_str(values.get("station_id"))
        segment_id = safe_str(values.get("segment_id"))
        if (station_id is None) == (segment_id is None):
            raise ValueError("event must reference exactly one of station_id or segment_id")
        folded = dict(values)
        if station_id is not None:
            folded["owner"] = {"kind": "station", "entity_id": station_id}
        else:
            folded["owner"] = {"kind": "segment", "entity_id": segment_id}
        return folded

    @field_validator("event_type", mode="before")
    @classmethod
    def _coerce_event_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return EventType(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> str | None:
        return safe_str(value)

    @property
    def year(self) -> int | None:
        """Calendar year of :attr:`date`, or ``None`` if it does not parse."""
        return parse_year(self.date)

    @property
    def station_id(self) -> str | None:
        return self.owner.entity_id if isinstance(self.owner, StationOwner) else None

    @property
    def segment_id(self) -> str | None:
        return self.owner.entity_id if isinstance(self.owner, SegmentOwner) else None
