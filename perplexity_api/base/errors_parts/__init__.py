"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `perplexity_api.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .perplexity_error import PerplexityError
from .request_validation_error import RequestValidationError
from .transport_error import TransportError
from .api_error import APIError
from .decode_error import DecodeError
from .stream_read_error import StreamReadError
from .usage_error import UsageError
from .classification import classify_exception, classify_status

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
