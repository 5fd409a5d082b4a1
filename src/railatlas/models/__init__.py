"""Typed records for railway source tables and resolution results."""

from railatlas.models._base import AtlasBaseModel, AtlasEnum
from railatlas.models.event import (
    EventOwner,
    EventType,
    LifecycleEvent,
    OwnerKind,
    SegmentOwner,
    StationOwner,
)
from railatlas.models.resolved import EntityState, ResolvedSegment, ResolvedStation, YearSnapshot
from railatlas.models.segment import Segment
from railatlas.models.station import Station, StationName

__all__ = [
    "AtlasBaseModel",
    "AtlasEnum",
    "EntityState",
    "EventOwner",
    "EventType",
    "LifecycleEvent",
    "OwnerKind",
    "ResolvedSegment",
    "ResolvedStation",
    "Segment",
    "SegmentOwner",
    "Station",
    "StationName",
    "StationOwner",
    "YearSnapshot",
]
