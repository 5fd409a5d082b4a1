"""Base model and enum for railway source records.

Every record model inherits from :class:`AtlasBaseModel` which provides:

* A ``model_validator(mode="before")`` that strips blank cells (``""``,
  whitespace, NaN) so the field default is used.
* A ``raw`` dict that captures the original source row.

Categorical enums inherit from :class:`AtlasEnum`, a string enum with an
``UNKNOWN`` member and a ``_missing_`` hook that matches case-insensitively
and returns ``UNKNOWN`` for any other value.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Placeholder strings exports use for "no value".
_SENTINELS = frozenset({"", "NaN", "nan", "null", "None"})


class AtlasEnum(StrEnum):
    """Base for categorical source fields.

    Subclasses **must** define ``UNKNOWN = "unknown"``.
    """

    @classmethod
    def _missing_(cls, value: object) -> AtlasEnum:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        unknown: AtlasEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class AtlasBaseModel(BaseModel):
    """Base for source record models.

    Handles:
    * blank / placeholder cells → dropped so the field default is used
    * stashes the original source row in ``raw``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original source row."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value.strip() if isinstance(value, str) else value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_source_values(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw row."""
        if not isinstance(values, dict):
            return values
        cleaned = AtlasBaseModel._clean_dict(values)

        # Keep an explicitly passed raw= (e.g. when re-validating a dump).
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
