"""Request validation error raised before any network activity."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class RequestValidationError(PerplexityError):
    """A ``ChatCompletionRequest`` violated a field or cross-field rule.

    Fully recoverable: the caller corrects the request and sends it again.
    """

    code: ErrorCode = ErrorCode.VALIDATION


__all__ = ["RequestValidationError"]
