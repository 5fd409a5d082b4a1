"""Session configuration for railatlas."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from railatlas._constants import EVENTS_FILE, SEGMENTS_FILE, STATION_NAMES_FILE, STATIONS_FILE


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class AtlasConfig:
    """Where and how to load the railway dataset.

    Parameters
    ----------
    data_dir : str or None
        Local directory holding the source CSV files.
    base_url : str or None
        HTTP base URL the source CSV files are served under.  Exactly one
        of ``data_dir`` and ``base_url`` must be set.
    stations_file : str
        Station table file name (required).
    station_names_file : str
        Alternate-name table file name (required).
    events_file : str
        Lifecycle event table file name (optional).
    segments_file : str
        Segment table file name (optional).
    demo_timeline : bool
        Substitute the built-in demo events and segments when the event
        or segment file is absent.
    request_timeout : float
        Total timeout in seconds for each HTTP request.
    """

    data_dir: str | None = None
    base_url: str | None = None
    stations_file: str = STATIONS_FILE
    station_names_file: str = STATION_NAMES_FILE
    events_file: str = EVENTS_FILE
    segments_file: str = SEGMENTS_FILE
    demo_timeline: bool = True
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls, **overrides: Any) -> AtlasConfig:
        """Create configuration from ``RAILATLAS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RAILATLAS_DATA_DIR": "data_dir",
            "RAILATLAS_BASE_URL": "base_url",
            "RAILATLAS_STATIONS_FILE": "stations_file",
            "RAILATLAS_STATION_NAMES_FILE": "station_names_file",
            "RAILATLAS_EVENTS_FILE": "events_file",
            "RAILATLAS_SEGMENTS_FILE": "segments_file",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip():
                config_kwargs[field_name] = val.strip()

        if "demo_timeline" not in overrides:
            config_kwargs["demo_timeline"] = _env_bool(env.get("RAILATLAS_DEMO_TIMELINE"), True)

        timeout_env = env.get("RAILATLAS_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
