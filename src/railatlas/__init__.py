"""railatlas - Year-by-year state resolution for historical railway networks."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("railatlas")
except PackageNotFoundError:
    __version__ = "0+local"
from railatlas.client import AtlasStatus, RailAtlas
from railatlas.config import AtlasConfig
from railatlas.dataset import RailwayDataset
from railatlas.exceptions import (
    AtlasConfigError,
    AtlasTransportError,
    DataUnavailableError,
    RailAtlasError,
)
from railatlas.ingestion.geometry import GeometryShape, classify_geometry, normalize_geometry
from railatlas.models import (
    EntityState,
    EventType,
    LifecycleEvent,
    ResolvedSegment,
    ResolvedStation,
    Segment,
    SegmentOwner,
    Station,
    StationName,
    StationOwner,
    YearSnapshot,
)
from railatlas.state.index import EntityTimeline, EventIndex
from railatlas.state.names import aggregate_names
from railatlas.state.policy import resolve, resolve_segment, resolve_station
from railatlas.state.query import query_for_year

__all__ = [
    "__version__",
    "AtlasConfig",
    "AtlasConfigError",
    "AtlasStatus",
    "AtlasTransportError",
    "DataUnavailableError",
    "EntityState",
    "EntityTimeline",
    "EventIndex",
    "EventType",
    "GeometryShape",
    "LifecycleEvent",
    "RailAtlas",
    "RailAtlasError",
    "RailwayDataset",
    "ResolvedSegment",
    "ResolvedStation",
    "Segment",
    "SegmentOwner",
    "Station",
    "StationName",
    "StationOwner",
    "YearSnapshot",
    "aggregate_names",
    "classify_geometry",
    "normalize_geometry",
    "query_for_year",
    "resolve",
    "resolve_segment",
    "resolve_station",
]
