"""Stream read error: the event stream itself failed, not a line in it."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class StreamReadError(PerplexityError):
    """Reading the event stream failed mid-loop."""

    code: ErrorCode = ErrorCode.STREAM_READ


__all__ = ["StreamReadError"]
