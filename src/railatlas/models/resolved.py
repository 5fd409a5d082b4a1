"""Per-year resolution results."""

from __future__ import annotations

from collections import Counter
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from railatlas.models.segment import Segment
from railatlas.models.station import Station


class EntityState(StrEnum):
    """Categorical state of an entity in a query year.

    ``GAUGE_CHANGE`` is reserved: no resolution rule produces it yet.
    """

    PLANNED = "planned"
    EXISTING = "existing"
    NEW = "new"
    ELECTRIFIED = "electrified"
    GAUGE_CHANGE = "gauge_change"
    CLOSED = "closed"


class ResolvedStation(Station):
    """A station together with its state and alternate names for one year."""

    state: EntityState
    alternative_names: dict[str, str] = Field(default_factory=dict)


class ResolvedSegment(Segment):
    """A segment together with its state for one year."""

    state: EntityState


class YearSnapshot(BaseModel):
    """Everything visible on the map for one query year.

    Excluded entities are absent from both collections.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    stations: tuple[ResolvedStation, ...] = ()
    segments: tuple[ResolvedSegment, ...] = ()

    def summary(self) -> dict[str, dict[str, int]]:
        """Count entities per state, for both collections."""
        return {
            "stations": dict(Counter(station.state.value for station in self.stations)),
            "segments": dict(Counter(segment.state.value for segment in self.segments)),
        }
