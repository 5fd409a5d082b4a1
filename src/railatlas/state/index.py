"""Lifecycle event index.

Groups events by owning entity and, within an entity, by event kind.  No
ordering is applied here; the resolver picks years at query time.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Collection, Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from railatlas.models.event import EventType, LifecycleEvent, OwnerKind

_logger = logging.getLogger(__name__)

EntityKey = tuple[OwnerKind, str]


@dataclass(frozen=True)
class EntityTimeline:
    """All events of one entity, bucketed by kind."""

    by_kind: Mapping[EventType, tuple[LifecycleEvent, ...]] = field(default_factory=dict)

    def events(self, kind: EventType) -> tuple[LifecycleEvent, ...]:
        return self.by_kind.get(kind, ())

    def years(self, kind: EventType) -> Iterator[int]:
        """Calendar years of *kind* events; events with unparseable dates are skipped."""
        for event in self.events(kind):
            year = event.year
            if year is None:
                _logger.debug("Ignoring event %s with unparseable date %r", event.event_id, event.date)
                continue
            yield year

    def latest_year_at_or_before(self, kind: EventType, year: int) -> int | None:
        """Maximum *kind* event year that is ``<= year``, or ``None``."""
        return max((y for y in self.years(kind) if y <= year), default=None)

    def __len__(self) -> int:
        return sum(len(events) for events in self.by_kind.values())


EMPTY_TIMELINE = EntityTimeline()


class EventIndex:
    """Events grouped by ``(owner kind, entity id)``.

    Lookups for entities without events return :data:`EMPTY_TIMELINE`.
    """

    def __init__(self, timelines: Mapping[EntityKey, EntityTimeline]) -> None:
        self._timelines = dict(timelines)

    @classmethod
    def from_events(
        cls,
        events: Iterable[LifecycleEvent],
        *,
        station_ids: Collection[str] | None = None,
        segment_ids: Collection[str] | None = None,
    ) -> EventIndex:
        """Build an index from a flat event collection.

        When *station_ids* / *segment_ids* are given, events owned by an
        entity outside those sets are dropped.
        """
        known: dict[OwnerKind, Collection[str] | None] = {
            OwnerKind.STATION: station_ids,
            OwnerKind.SEGMENT: segment_ids,
        }
        grouped: dict[EntityKey, dict[EventType, list[LifecycleEvent]]] = defaultdict(lambda: defaultdict(list))
        orphans = 0
        for event in events:
            kind, entity_id = event.owner.key
            allowed = known.get(kind)
            if allowed is not None and entity_id not in allowed:
                orphans += 1
                continue
            grouped[(kind, entity_id)][event.event_type].append(event)

        if orphans:
            _logger.debug("Dropped %d events referencing unknown entities", orphans)

        return cls(
            {
                key: EntityTimeline(by_kind={kind: tuple(bucket) for kind, bucket in buckets.items()})
                for key, buckets in grouped.items()
            }
        )

    def timeline(self, kind: OwnerKind, entity_id: str) -> EntityTimeline:
        return self._timelines.get((kind, entity_id), EMPTY_TIMELINE)

    def for_station(self, station_id: str) -> EntityTimeline:
        return self.timeline(OwnerKind.STATION, station_id)

    def for_segment(self, segment_id: str) -> EntityTimeline:
        return self.timeline(OwnerKind.SEGMENT, segment_id)

    def __contains__(self, key: object) -> bool:
        return key in self._timelines

    def __len__(self) -> int:
        return len(self._timelines)
