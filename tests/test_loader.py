from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aiohttp
import pytest

from railatlas._transport import DirectoryDataSource, HttpDataSource
from railatlas.config import AtlasConfig
from railatlas.exceptions import AtlasTransportError, DataUnavailableError
from railatlas.ingestion.loader import load_dataset, parse_csv_records, parse_records
from railatlas.models.event import EventType
from railatlas.models.station import Station

STATIONS_CSV = """station_id,name_primary,lat,lon,current_status,created_at
RU.STN.A,Alpha,55.75,37.61,open,1890-01-01
RU.STN.B,"Beta, central",59.93,30.36,closed,
RU.STN.C,Gamma,not-a-number,30.0,open,
,Nameless,10.0,10.0,open,
"""

NAMES_CSV = """station_id,name,language
RU.STN.A,Альфа,ru
RU.STN.A,Alpha,en
RU.STN.B,,ru
"""

EVENTS_CSV = """event_id,event_type,date,date_precision,station_id,segment_id
E1,station_open,1890-05-01,month,RU.STN.A,
E2,segment_open,1901,year,,SEG_1
E3,station_close,1950,year,,
E4,station_close,1950,year,RU.STN.A,SEG_1
"""

SEGMENTS_CSV = """segment_id,from_station_id,to_station_id,geometry
SEG_1,RU.STN.A,RU.STN.B,"[[55.75,37.61],[59.93,30.36]]"
SEG_2,RU.STN.B,RU.STN.A,"{""type"":""LineString"",""coordinates"":[[59.93,30.36],[55.75,37.61]]}"
SEG_3,RU.STN.B,,
"""


@dataclass
class FakeSource:
    tables: dict[str, str] = field(default_factory=dict)
    errors: dict[str, Exception] = field(default_factory=dict)
    reads: list[str] = field(default_factory=list)

    async def read_text(self, name: str) -> str | None:
        self.reads.append(name)
        if name in self.errors:
            raise self.errors[name]
        return self.tables.get(name)


def _full_source() -> FakeSource:
    return FakeSource(
        tables={
            "stations.csv": STATIONS_CSV,
            "station_names.csv": NAMES_CSV,
            "events.csv": EVENTS_CSV,
            "segments.csv": SEGMENTS_CSV,
        }
    )


# ------------------------------------------------------------------
# CSV parsing
# ------------------------------------------------------------------


class TestParseCsvRecords:
    def test_quoted_fields(self) -> None:
        rows = parse_csv_records('id,name\n1,"Beta, central"\n2,"He said ""hi"""\n')
        assert rows == [{"id": "1", "name": "Beta, central"}, {"id": "2", "name": 'He said "hi"'}]

    def test_blank_rows_are_skipped(self) -> None:
        rows = parse_csv_records("id,name\n1,a\n\n,\n2,b\n")
        assert [row["id"] for row in rows] == ["1", "2"]

    def test_headers_and_values_stripped(self) -> None:
        rows = parse_csv_records(" id , name \n 1 , a \n")
        assert rows == [{"id": "1", "name": "a"}]

    def test_extra_cells_discarded(self) -> None:
        rows = parse_csv_records("id\n1,overflow\n")
        assert rows == [{"id": "1"}]

    def test_short_rows_padded_blank(self) -> None:
        rows = parse_csv_records("id,name\n1\n")
        assert rows == [{"id": "1", "name": ""}]

    def test_empty_text(self) -> None:
        assert parse_csv_records("") == []


def test_parse_records_counts_drops() -> None:
    rows = [
        {"station_id": "S1", "lat": "1", "lon": "2"},
        {"station_id": "S2", "lat": "inf", "lon": "2"},
        {"lat": "1", "lon": "2"},
    ]
    parsed, dropped = parse_records(Station, rows, table="stations")

    assert [station.station_id for station in parsed] == ["S1"]
    assert dropped == 2


# ------------------------------------------------------------------
# load_dataset
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_load_full_dataset() -> None:
    dataset, report = await load_dataset(_full_source(), AtlasConfig(data_dir="unused"))

    assert [station.station_id for station in dataset.stations] == ["RU.STN.A", "RU.STN.B"]
    assert dataset.stations[1].name_primary == "Beta, central"
    assert dataset.stations[1].is_marked_closed
    assert dataset.stations[0].created_at_year == 1890

    assert report.accepted == {"stations": 2, "station_names": 2, "events": 2, "segments": 2}
    assert report.dropped == {"stations": 2, "station_names": 1, "events": 2, "segments": 1}
    assert report.total_dropped == 6
    assert report.demo_tables == []

    assert [event.event_type for event in dataset.events] == [EventType.STATION_OPEN, EventType.SEGMENT_OPEN]
    assert dataset.segments[0].geometry == ((55.75, 37.61), (59.93, 30.36))
    assert dataset.segments[1].geometry == ((59.93, 30.36), (55.75, 37.61))


@pytest.mark.asyncio
async def test_out_of_range_geometry_does_not_break_load() -> None:
    source = _full_source()
    source.tables["segments.csv"] = (
        "segment_id,from_station_id,to_station_id,geometry\n"
        'SEG_1,RU.STN.A,RU.STN.B,"[[55.75,37.61],[59.93,30.36]]"\n'
        f'SEG_2,RU.STN.B,RU.STN.A,"[[{10**400},1],[59.93,30.36]]"\n'
        f'SEG_3,RU.STN.B,RU.STN.A,"{"[" * 5000}{"]" * 5000}"\n'
    )

    dataset, report = await load_dataset(source, AtlasConfig(data_dir="unused"))

    assert [segment.segment_id for segment in dataset.segments] == ["SEG_1", "SEG_2", "SEG_3"]
    assert dataset.segments[0].geometry == ((55.75, 37.61), (59.93, 30.36))
    assert dataset.segments[1].geometry == ((59.93, 30.36),)
    assert dataset.segments[2].geometry == ()
    assert report.dropped["segments"] == 0


@pytest.mark.asyncio
async def test_missing_timeline_tables_use_demo() -> None:
    source = FakeSource(tables={"stations.csv": STATIONS_CSV, "station_names.csv": NAMES_CSV})
    dataset, report = await load_dataset(source, AtlasConfig(data_dir="unused"))

    assert report.demo_tables == ["events.csv", "segments.csv"]
    assert report.dropped["events"] == 0
    assert report.dropped["segments"] == 0
    assert {segment.segment_id for segment in dataset.segments} >= {"SEG_0001", "SEG_0005"}
    assert any(event.event_id == "EVT_SEG_0009" for event in dataset.events)


@pytest.mark.asyncio
async def test_present_tables_are_never_replaced_by_demo() -> None:
    source = _full_source()
    source.tables["events.csv"] = "event_id,event_type,date,station_id\n"
    dataset, report = await load_dataset(source, AtlasConfig(data_dir="unused"))

    assert dataset.events == ()
    assert report.demo_tables == []


@pytest.mark.asyncio
async def test_missing_timeline_without_demo_fails() -> None:
    source = FakeSource(tables={"stations.csv": STATIONS_CSV, "station_names.csv": NAMES_CSV})

    with pytest.raises(DataUnavailableError) as excinfo:
        await load_dataset(source, AtlasConfig(data_dir="unused", demo_timeline=False))
    assert excinfo.value.resource == "events.csv"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["stations.csv", "station_names.csv"])
async def test_missing_required_table_fails(missing: str) -> None:
    source = _full_source()
    del source.tables[missing]

    with pytest.raises(DataUnavailableError) as excinfo:
        await load_dataset(source, AtlasConfig(data_dir="unused"))
    assert excinfo.value.resource == missing


@pytest.mark.asyncio
async def test_transport_error_becomes_unavailable() -> None:
    source = _full_source()
    source.errors["station_names.csv"] = AtlasTransportError("HTTP 500", status_code=500, resource="station_names.csv")

    with pytest.raises(DataUnavailableError) as excinfo:
        await load_dataset(source, AtlasConfig(data_dir="unused"))
    assert excinfo.value.resource == "station_names.csv"
    assert isinstance(excinfo.value.__cause__, AtlasTransportError)


@pytest.mark.asyncio
async def test_custom_file_names() -> None:
    source = FakeSource(
        tables={
            "st.csv": STATIONS_CSV,
            "nm.csv": NAMES_CSV,
            "ev.csv": EVENTS_CSV,
            "sg.csv": SEGMENTS_CSV,
        }
    )
    config = AtlasConfig(
        data_dir="unused",
        stations_file="st.csv",
        station_names_file="nm.csv",
        events_file="ev.csv",
        segments_file="sg.csv",
    )
    dataset, report = await load_dataset(source, config)

    assert source.reads == ["st.csv", "nm.csv", "ev.csv", "sg.csv"]
    assert len(dataset.segments) == 2
    assert report.demo_tables == []


# ------------------------------------------------------------------
# Directory transport
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_directory_source_reads_utf8_with_bom(tmp_path: Path) -> None:
    (tmp_path / "stations.csv").write_text("\ufeffstation_id,lat,lon\nS,1,2\n", encoding="utf-8")
    source = DirectoryDataSource(tmp_path)

    text = await source.read_text("stations.csv")

    assert text == "station_id,lat,lon\nS,1,2\n"
    assert await source.read_text("absent.csv") is None
    assert source.directory == tmp_path


# ------------------------------------------------------------------
# HTTP transport
# ------------------------------------------------------------------


class FakeResponse:
    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self._text = text

    async def text(self, encoding: str | None = None) -> str:
        return self._text

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeHttpSession:
    responses: dict[str, FakeResponse] = field(default_factory=dict)
    error: Exception | None = None
    requested: list[str] = field(default_factory=list)
    headers: list[dict[str, str]] = field(default_factory=list)

    def get(self, url: str, *, headers: dict[str, str], timeout: Any) -> FakeResponse:
        self.requested.append(url)
        self.headers.append(headers)
        if self.error is not None:
            raise self.error
        return self.responses[url]


@pytest.mark.asyncio
async def test_http_source_ok_and_missing() -> None:
    session = FakeHttpSession(
        responses={
            "https://example.org/data/stations.csv": FakeResponse(200, "\ufeffstation_id\nS\n"),
            "https://example.org/data/events.csv": FakeResponse(404, "not found"),
        }
    )
    source = HttpDataSource("https://example.org/data/", session)  # type: ignore[arg-type]

    assert await source.read_text("stations.csv") == "station_id\nS\n"
    assert await source.read_text("events.csv") is None
    assert session.requested == [
        "https://example.org/data/stations.csv",
        "https://example.org/data/events.csv",
    ]
    assert session.headers[0]["user-agent"].startswith("railatlas/")


@pytest.mark.asyncio
async def test_http_source_server_error() -> None:
    session = FakeHttpSession(responses={"https://example.org/stations.csv": FakeResponse(503, "busy")})
    source = HttpDataSource("https://example.org", session)  # type: ignore[arg-type]

    with pytest.raises(AtlasTransportError) as excinfo:
        await source.read_text("stations.csv")
    assert excinfo.value.status_code == 503
    assert excinfo.value.resource == "stations.csv"


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()])
async def test_http_source_network_failure(error: Exception) -> None:
    session = FakeHttpSession(error=error)
    source = HttpDataSource("https://example.org", session)  # type: ignore[arg-type]

    with pytest.raises(AtlasTransportError) as excinfo:
        await source.read_text("stations.csv")
    assert excinfo.value.status_code is None
    assert excinfo.value.resource == "stations.csv"
