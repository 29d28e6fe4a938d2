"""Usage error for client misuse detected at call time."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class UsageError(PerplexityError):
    """Raised when the caller's setup cannot handle what the service sent.

    The main case is an event-stream response with no ``stream`` callback on
    the request; it is raised before any body bytes are read.
    """

    code: ErrorCode = ErrorCode.USAGE


__all__ = ["UsageError"]
