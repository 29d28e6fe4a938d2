"""
Base class for decoded wire values.

The service sends ``null`` for fields it has nothing to say about (for
example ``usage`` on early stream events). Such keys are dropped before
validation so the field default applies, the same as an absent key. Unknown
keys are ignored so new service fields never break decoding.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class WireModel(BaseModel):
    """Frozen pydantic model tolerant of ``null`` and unknown keys."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


__all__ = ["WireModel"]
