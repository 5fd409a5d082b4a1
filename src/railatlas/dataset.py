"""The immutable, session-scoped railway dataset."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr

from railatlas.models.event import LifecycleEvent
from railatlas.models.segment import Segment
from railatlas.models.station import Station, StationName
from railatlas.state.index import EventIndex


class RailwayDataset(BaseModel):
    """The four loaded collections.

    The event index and the per-station name lists do not depend on the
    query year, so they are built once when the dataset is created.
    """

    model_config = ConfigDict(frozen=True)

    stations: tuple[Station, ...] = ()
    station_names: tuple[StationName, ...] = ()
    events: tuple[LifecycleEvent, ...] = ()
    segments: tuple[Segment, ...] = ()

    _index: EventIndex = PrivateAttr()
    _names_by_station: dict[str, tuple[StationName, ...]] = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._index = EventIndex.from_events(
            self.events,
            station_ids={station.station_id for station in self.stations},
            segment_ids={segment.segment_id for segment in self.segments},
        )
        grouped: dict[str, list[StationName]] = defaultdict(list)
        for record in self.station_names:
            grouped[record.station_id].append(record)
        self._names_by_station = {station_id: tuple(records) for station_id, records in grouped.items()}

    @property
    def index(self) -> EventIndex:
        return self._index

    def names_for(self, station_id: str) -> tuple[StationName, ...]:
        """Name records of one station, in load order."""
        return self._names_by_station.get(station_id, ())
