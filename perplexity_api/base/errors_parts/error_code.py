"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `PerplexityError`.
Values are lowercase snake_case and are stable for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    CLIENT_ERROR = "client_error"
    TRANSPORT = "transport"
    DECODE = "decode"
    STREAM_READ = "stream_read"
    USAGE = "usage"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
