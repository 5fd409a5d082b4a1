"""Deterministic year resolution policy.

This module contains *no* payload parsing.  It receives an entity's
indexed timeline and answers one question: which state does the entity
show in a given year, or is it not on the map at all.

Rules, first match wins:

1. no opening year at or before the query year (and no fallback) → planned
2. last closure strictly before the query year → excluded
3. closure in the query year → closed
4. station manually marked closed → closed
5. electrification in the query year → electrified
6. opening event in the query year → new
7. otherwise → existing
"""

from __future__ import annotations

from dataclasses import dataclass

from railatlas.models.event import EventType
from railatlas.models.resolved import EntityState
from railatlas.models.segment import Segment
from railatlas.models.station import Station
from railatlas.state.index import EntityTimeline


@dataclass(frozen=True)
class ResolutionProfile:
    """What differs between entity kinds during resolution."""

    open_kind: EventType
    close_kind: EventType
    has_status_override: bool


STATION_PROFILE = ResolutionProfile(
    open_kind=EventType.STATION_OPEN,
    close_kind=EventType.STATION_CLOSE,
    has_status_override=True,
)
SEGMENT_PROFILE = ResolutionProfile(
    open_kind=EventType.SEGMENT_OPEN,
    close_kind=EventType.SEGMENT_CLOSE,
    has_status_override=False,
)


@dataclass(frozen=True)
class EffectiveYears:
    """Years attributed to an entity for one query year.

    ``open_year`` is ``None`` when the entity has neither a qualifying open
    event nor a fallback year, i.e. it is unscheduled.
    """

    query_year: int
    open_year: int | None
    open_from_event: bool
    close_year: int | None
    electrify_year: int | None


def effective_years(
    timeline: EntityTimeline,
    query_year: int,
    *,
    profile: ResolutionProfile,
    fallback_open_year: int | None = None,
) -> EffectiveYears:
    """Pick the latest open/close/electrification years at or before *query_year*."""
    open_year = timeline.latest_year_at_or_before(profile.open_kind, query_year)
    open_from_event = open_year is not None
    if open_year is None:
        open_year = fallback_open_year
    return EffectiveYears(
        query_year=query_year,
        open_year=open_year,
        open_from_event=open_from_event,
        close_year=timeline.latest_year_at_or_before(profile.close_kind, query_year),
        electrify_year=timeline.latest_year_at_or_before(EventType.ELECTRIFICATION, query_year),
    )


def decide_state(years: EffectiveYears, *, marked_closed: bool = False) -> EntityState | None:
    """Apply the precedence rules.  ``None`` means the entity is excluded."""
    query_year = years.query_year
    if years.open_year is None or years.open_year > query_year:
        return EntityState.PLANNED
    if years.close_year is not None and years.close_year < query_year:
        return None
    if years.close_year == query_year:
        return EntityState.CLOSED
    if marked_closed:
        return EntityState.CLOSED
    if years.electrify_year == query_year:
        return EntityState.ELECTRIFIED
    if years.open_from_event and years.open_year == query_year:
        return EntityState.NEW
    return EntityState.EXISTING


def resolve(
    timeline: EntityTimeline,
    query_year: int,
    *,
    profile: ResolutionProfile,
    fallback_open_year: int | None = None,
    marked_closed: bool = False,
) -> EntityState | None:
    """Resolve an entity's state for *query_year*; ``None`` means excluded."""
    years = effective_years(
        timeline,
        query_year,
        profile=profile,
        fallback_open_year=fallback_open_year,
    )
    return decide_state(years, marked_closed=profile.has_status_override and marked_closed)


def resolve_station(station: Station, timeline: EntityTimeline, query_year: int) -> EntityState | None:
    return resolve(
        timeline,
        query_year,
        profile=STATION_PROFILE,
        fallback_open_year=station.created_at_year,
        marked_closed=station.is_marked_closed,
    )


def resolve_segment(segment: Segment, timeline: EntityTimeline, query_year: int) -> EntityState | None:
    # Segments carry no creation date or status override.
    return resolve(timeline, query_year, profile=SEGMENT_PROFILE)
