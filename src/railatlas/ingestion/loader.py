"""Dataset loading.

Reads the four source tables through a :class:`~railatlas._transport.DataSource`,
validates every row into a typed record, and assembles an immutable
:class:`~railatlas.dataset.RailwayDataset`.

Failure policy:

- a missing required table, a table that does not parse as CSV, or a
  transport failure raises :class:`DataUnavailableError`; nothing partial
  is returned
- a malformed row is dropped, logged at DEBUG and counted in the
  :class:`LoadReport`
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from railatlas._demo import DEMO_EVENTS, DEMO_SEGMENTS
from railatlas._transport import DataSource
from railatlas.config import AtlasConfig
from railatlas.dataset import RailwayDataset
from railatlas.exceptions import AtlasTransportError, DataUnavailableError
from railatlas.models.event import LifecycleEvent
from railatlas.models.segment import Segment
from railatlas.models.station import Station, StationName

_logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)


@dataclass
class LoadReport:
    """Row counts per table from one load."""

    accepted: dict[str, int] = field(default_factory=dict)
    dropped: dict[str, int] = field(default_factory=dict)
    demo_tables: list[str] = field(default_factory=list)
    """Tables that were filled from the built-in demo timeline."""

    @property
    def total_dropped(self) -> int:
        return sum(self.dropped.values())


def parse_csv_records(text: str) -> list[dict[str, str]]:
    """Parse CSV text with a header row into dicts.

    Header names and values are stripped; rows whose cells are all blank
    are skipped.  Cells beyond the header width are discarded.
    """
    reader = csv.DictReader(io.StringIO(text))
    if reader.fieldnames is None:
        return []
    reader.fieldnames = [name.strip() for name in reader.fieldnames]

    records: list[dict[str, str]] = []
    for row in reader:
        record = {key: (value or "").strip() for key, value in row.items() if key is not None}
        if any(record.values()):
            records.append(record)
    return records


def parse_records(model: type[TModel], rows: Iterable[Mapping[str, Any]], *, table: str) -> tuple[list[TModel], int]:
    """Validate *rows* into *model* instances, dropping the ones that fail."""
    parsed: list[TModel] = []
    dropped = 0
    for position, row in enumerate(rows):
        try:
            parsed.append(model.model_validate(dict(row)))
        except ValidationError as exc:
            dropped += 1
            _logger.debug("Dropping %s row %d: %s", table, position, exc.errors(include_url=False))
    return parsed, dropped


async def _read_table(source: DataSource, name: str, *, required: bool) -> list[dict[str, str]] | None:
    try:
        text = await source.read_text(name)
    except AtlasTransportError as exc:
        raise DataUnavailableError(f"Failed to load {name}: {exc}", resource=name) from exc
    except OSError as exc:
        raise DataUnavailableError(f"Failed to read {name}: {exc}", resource=name) from exc

    if text is None:
        if required:
            raise DataUnavailableError(f"Required table {name} is missing", resource=name)
        return None

    try:
        return parse_csv_records(text)
    except csv.Error as exc:
        raise DataUnavailableError(f"Table {name} is not valid CSV: {exc}", resource=name) from exc


async def load_dataset(source: DataSource, config: AtlasConfig) -> tuple[RailwayDataset, LoadReport]:
    """Load and validate all tables from *source*."""
    report = LoadReport()

    station_rows = await _read_table(source, config.stations_file, required=True)
    name_rows = await _read_table(source, config.station_names_file, required=True)
    event_rows: Iterable[Mapping[str, Any]] | None = await _read_table(source, config.events_file, required=False)
    segment_rows: Iterable[Mapping[str, Any]] | None = await _read_table(
        source, config.segments_file, required=False
    )

    if event_rows is None:
        if not config.demo_timeline:
            raise DataUnavailableError(f"Table {config.events_file} is missing", resource=config.events_file)
        _logger.warning("%s not found; using the built-in demo timeline events", config.events_file)
        event_rows = DEMO_EVENTS
        report.demo_tables.append(config.events_file)
    if segment_rows is None:
        if not config.demo_timeline:
            raise DataUnavailableError(f"Table {config.segments_file} is missing", resource=config.segments_file)
        _logger.warning("%s not found; using the built-in demo timeline segments", config.segments_file)
        segment_rows = DEMO_SEGMENTS
        report.demo_tables.append(config.segments_file)

    assert station_rows is not None and name_rows is not None  # noqa: S101
    stations, report.dropped["stations"] = parse_records(Station, station_rows, table="stations")
    names, report.dropped["station_names"] = parse_records(StationName, name_rows, table="station_names")
    events, report.dropped["events"] = parse_records(LifecycleEvent, event_rows, table="events")
    segments, report.dropped["segments"] = parse_records(Segment, segment_rows, table="segments")

    report.accepted = {
        "stations": len(stations),
        "station_names": len(names),
        "events": len(events),
        "segments": len(segments),
    }
    _logger.info(
        "Loaded %d stations, %d names, %d events, %d segments (%d rows dropped)",
        len(stations),
        len(names),
        len(events),
        len(segments),
        report.total_dropped,
    )

    dataset = RailwayDataset(
        stations=tuple(stations),
        station_names=tuple(names),
        events=tuple(events),
        segments=tuple(segments),
    )
    return dataset, report
