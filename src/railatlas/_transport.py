"""Source file transports: local directory and HTTP."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

import aiohttp

from railatlas._constants import USER_AGENT
from railatlas.config import AtlasConfig
from railatlas.exceptions import AtlasConfigError, AtlasTransportError

_logger = logging.getLogger(__name__)


class DataSource(Protocol):
    """Structural source interface used by the loader.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementations concrete.
    """

    async def read_text(self, name: str) -> str | None:
        """Return the text of resource *name*, or ``None`` if it does not exist."""
        ...


class DirectoryDataSource:
    """Reads source files from a local directory."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def read_text(self, name: str) -> str | None:
        path = self._directory / name
        _logger.debug("Reading %s", path)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
        except FileNotFoundError:
            return None


class HttpDataSource:
    """Fetches source files with ``GET <base_url>/<name>``.

    A 404 means the resource is missing; any other non-200 status is a
    transport error.
    """

    def __init__(
        self,
        base_url: str,
        http_session: aiohttp.ClientSession,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def read_text(self, name: str) -> str | None:
        url = f"{self._base_url}/{name}"
        _logger.debug("GET %s", url)
        try:
            async with self._http.get(url, headers={"user-agent": USER_AGENT}, timeout=self._timeout) as resp:
                if resp.status == 404:
                    return None
                text = await resp.text(encoding="utf-8")
                if resp.status != 200:
                    raise AtlasTransportError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        resource=name,
                    )
        except AtlasTransportError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise AtlasTransportError(
                f"Request to {url} failed: {exc}",
                resource=name,
            ) from exc
        return text.removeprefix("\ufeff")


def build_source(config: AtlasConfig, http_session: aiohttp.ClientSession | None = None) -> DataSource:
    """Pick the transport named by *config*."""
    if bool(config.data_dir) == bool(config.base_url):
        raise AtlasConfigError("Exactly one of data_dir or base_url must be configured")
    if config.data_dir:
        return DirectoryDataSource(config.data_dir)
    if http_session is None:
        raise AtlasConfigError("An aiohttp session is required to load from base_url")
    assert config.base_url is not None  # noqa: S101
    return HttpDataSource(config.base_url, http_session, timeout=config.request_timeout)
