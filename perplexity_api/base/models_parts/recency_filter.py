"""Search recency filters."""
from __future__ import annotations

from enum import Enum


class RecencyFilter(str, Enum):
    """Restricts online search results to the given time interval.

    Does not apply to images.
    """

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


__all__ = ["RecencyFilter"]
