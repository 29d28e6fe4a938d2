"""API error for non-2xx responses."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class APIError(PerplexityError):
    """The service answered with a non-2xx status.

    ``message`` is ``"API error: <service message>"`` when the body carried a
    structured error, otherwise ``"unexpected status code: <status>"``.
    """

    code: ErrorCode = ErrorCode.CLIENT_ERROR


__all__ = ["APIError"]
