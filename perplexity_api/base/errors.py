"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``perplexity_api.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts import (
    APIError,
    DecodeError,
    ErrorCode,
    PerplexityError,
    RequestValidationError,
    StreamReadError,
    TransportError,
    UsageError,
    classify_exception,
    classify_status,
)

__all__ = [
    "ErrorCode",
    "PerplexityError",
    "RequestValidationError",
    "TransportError",
    "APIError",
    "DecodeError",
    "StreamReadError",
    "UsageError",
    "classify_exception",
    "classify_status",
]
