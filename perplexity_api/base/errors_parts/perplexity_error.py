"""
Structured client error exception type.

Base class of every error raised by the client. Subclasses live in sibling
modules (one class per file) and only pin a default ``code``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class PerplexityError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        status_code: HTTP status of the response, when one was received.
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    status_code: Optional[int] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["PerplexityError"]
