"""Custom exception hierarchy for railatlas."""

from __future__ import annotations


class RailAtlasError(Exception):
    """Base exception for all railatlas errors."""


class AtlasConfigError(RailAtlasError):
    """Invalid or missing configuration."""


class AtlasTransportError(RailAtlasError):
    """HTTP-level failure while fetching a source file (network, non-200)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        resource: str = "",
    ) -> None:
        self.status_code = status_code
        self.resource = resource
        super().__init__(message)


class DataUnavailableError(RailAtlasError):
    """The dataset could not be loaded, or has not been loaded yet.

    Raised when a required source file is missing or cannot be parsed as
    a whole.  A session that hit this during :meth:`RailAtlas.load` stays
    unavailable; it never exposes a partially-populated dataset.
    """

    def __init__(self, message: str, *, resource: str = "") -> None:
        self.resource = resource
        super().__init__(message)
