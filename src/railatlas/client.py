"""Session-level entry point: load once, query any year."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

import aiohttp

from railatlas._transport import DataSource, build_source
from railatlas.config import AtlasConfig
from railatlas.dataset import RailwayDataset
from railatlas.exceptions import DataUnavailableError, RailAtlasError
from railatlas.ingestion.loader import LoadReport, load_dataset
from railatlas.models.resolved import YearSnapshot
from railatlas.state.query import query_for_year

_logger = logging.getLogger(__name__)


class AtlasStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    UNAVAILABLE = "unavailable"


class RailAtlas:
    """Loads a railway dataset once per session and answers year queries.

    Usage::

        async with RailAtlas(AtlasConfig(data_dir="data")) as atlas:
            await atlas.load()
            snapshot = atlas.query_for_year(1900)

    The loaded dataset is immutable; every query builds fresh results, so
    queries may run from any thread.  :meth:`request_year` adds
    "latest request wins" delivery for interactive callers that change the
    year faster than results arrive.
    """

    def __init__(
        self,
        config: AtlasConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        source: DataSource | None = None,
        on_snapshot: Callable[[YearSnapshot], None] | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._source = source
        self._on_snapshot = on_snapshot
        self._dataset: RailwayDataset | None = None
        self._report: LoadReport | None = None
        self._status = AtlasStatus.IDLE
        self._error: str | None = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RailAtlas:
        if self._source is None:
            if self._config.base_url and self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._source = build_source(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @property
    def status(self) -> AtlasStatus:
        return self._status

    @property
    def error(self) -> str | None:
        """Why the session is unavailable, if it is."""
        return self._error

    @property
    def report(self) -> LoadReport | None:
        return self._report

    @property
    def dataset(self) -> RailwayDataset:
        return self._require_dataset()

    async def load(self) -> RailwayDataset:
        """Load the dataset.  Only the first call does any work.

        Raises :class:`DataUnavailableError` when loading fails; the session
        then stays :attr:`AtlasStatus.UNAVAILABLE`.
        """
        if self._status is AtlasStatus.READY:
            return self._require_dataset()
        if self._status is AtlasStatus.UNAVAILABLE:
            raise DataUnavailableError(self._error or "Dataset unavailable")
        if self._source is None:
            raise RailAtlasError("Atlas not initialized. Use 'async with RailAtlas(...) as atlas:'")

        self._status = AtlasStatus.LOADING
        try:
            dataset, report = await load_dataset(self._source, self._config)
        except DataUnavailableError as exc:
            self._fail(str(exc))
            raise
        except Exception as exc:
            self._fail(f"Unexpected error while loading dataset: {exc}")
            raise DataUnavailableError(self._error or str(exc)) from exc

        self._dataset = dataset
        self._report = report
        self._status = AtlasStatus.READY
        return dataset

    def _fail(self, message: str) -> None:
        _logger.error("Dataset unavailable: %s", message)
        self._dataset = None
        self._report = None
        self._error = message
        self._status = AtlasStatus.UNAVAILABLE

    def _require_dataset(self) -> RailwayDataset:
        if self._dataset is None:
            if self._status is AtlasStatus.UNAVAILABLE:
                raise DataUnavailableError(self._error or "Dataset unavailable")
            raise DataUnavailableError("Dataset not loaded. Call 'await atlas.load()' first")
        return self._dataset

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query_for_year(self, year: int) -> YearSnapshot:
        """Resolve every station and segment for *year*."""
        return query_for_year(self._require_dataset(), year)

    async def request_year(self, year: int) -> YearSnapshot | None:
        """Resolve *year* off the event loop, delivering only the latest request.

        Returns ``None`` when a newer :meth:`request_year` call was made
        while this one was computing; its result is discarded.  The
        ``on_snapshot`` callback only ever sees current results.
        """
        dataset = self._require_dataset()
        self._generation += 1
        generation = self._generation

        snapshot = await asyncio.to_thread(query_for_year, dataset, year)

        if generation != self._generation:
            _logger.debug("Discarding stale snapshot for year=%d", year)
            return None
        if self._on_snapshot is not None:
            try:
                self._on_snapshot(snapshot)
            except Exception:
                _logger.debug("on_snapshot callback failed", exc_info=True)
        return snapshot
