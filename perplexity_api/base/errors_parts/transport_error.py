"""Transport error wrapping failures of the underlying httpx exchange."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class TransportError(PerplexityError):
    """Connection, DNS, TLS, timeout or body-read failure.

    ``code`` is refined with :func:`classify_exception` by the raiser (for
    example ``TIMEOUT`` for ``httpx.TimeoutException``).
    """

    code: ErrorCode = ErrorCode.TRANSPORT


__all__ = ["TransportError"]
