"""Year query orchestration.

Runs the resolver over every station and segment of a dataset for one
year.  Each call builds fresh result objects from the immutable dataset;
nothing is carried over between calls.
"""

from __future__ import annotations

import logging

from railatlas.dataset import RailwayDataset
from railatlas.models.resolved import ResolvedSegment, ResolvedStation, YearSnapshot
from railatlas.state.names import aggregate_names
from railatlas.state.policy import resolve_segment, resolve_station

_logger = logging.getLogger(__name__)


def resolve_stations(dataset: RailwayDataset, year: int) -> list[ResolvedStation]:
    resolved: list[ResolvedStation] = []
    for station in dataset.stations:
        state = resolve_station(station, dataset.index.for_station(station.station_id), year)
        if state is None:
            continue
        resolved.append(
            ResolvedStation.model_validate(
                {
                    **station.model_dump(),
                    "state": state,
                    "alternative_names": aggregate_names(dataset.names_for(station.station_id)),
                }
            )
        )
    return resolved


def resolve_segments(dataset: RailwayDataset, year: int) -> list[ResolvedSegment]:
    resolved: list[ResolvedSegment] = []
    for segment in dataset.segments:
        state = resolve_segment(segment, dataset.index.for_segment(segment.segment_id), year)
        if state is None:
            continue
        resolved.append(ResolvedSegment.model_validate({**segment.model_dump(), "state": state}))
    return resolved


def query_for_year(dataset: RailwayDataset, year: int) -> YearSnapshot:
    """Resolve the whole dataset for *year*, dropping excluded entities."""
    snapshot = YearSnapshot(
        year=year,
        stations=tuple(resolve_stations(dataset, year)),
        segments=tuple(resolve_segments(dataset, year)),
    )
    _logger.debug(
        "Resolved year=%d: %d/%d stations, %d/%d segments",
        year,
        len(snapshot.stations),
        len(dataset.stations),
        len(snapshot.segments),
        len(dataset.segments),
    )
    return snapshot
