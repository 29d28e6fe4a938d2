"""Reasons the model stopped generating tokens."""
from __future__ import annotations

from enum import Enum


class FinishReason(str, Enum):
    """``STOP`` at a natural stopping point, ``LENGTH`` when ``max_tokens`` hit."""

    STOP = "stop"
    LENGTH = "length"


__all__ = ["FinishReason"]
