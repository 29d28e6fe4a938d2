"""Transport timeout configuration for the shared httpx clients.

The client has no overall deadline of its own; deadlines belong to the caller
(see :class:`~perplexity_api.base.cancellation.CancellationToken`). What lives
here are the transport-level budgets of the default httpx client, matching
the original service client: 30 s to connect, and a generous 300 s read
budget because the service may hold the response headers while the model
warms up.

Supported environment variables (all optional, positive floats):
    PERPLEXITY_TIMEOUT_CONNECT_SECONDS
    PERPLEXITY_TIMEOUT_READ_SECONDS
    PERPLEXITY_TIMEOUT_WRITE_SECONDS
    PERPLEXITY_TIMEOUT_POOL_SECONDS
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Budget for establishing the TCP/TLS session.
        read_timeout_seconds: Longest wait between two received chunks
            (including the wait for response headers).
        write_timeout_seconds: Longest wait to send one chunk of the body.
        pool_timeout_seconds: Longest wait to acquire a pooled connection.
    """

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: float = 300.0
    write_timeout_seconds: float = 30.0
    pool_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.pool_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None

_ENV_NAMES = (
    "PERPLEXITY_TIMEOUT_CONNECT_SECONDS",
    "PERPLEXITY_TIMEOUT_READ_SECONDS",
    "PERPLEXITY_TIMEOUT_WRITE_SECONDS",
    "PERPLEXITY_TIMEOUT_POOL_SECONDS",
)


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`.

    The cache is refreshed when any of the supported environment variables
    changed since the last call, so tests can adjust values at runtime.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.read_timeout_seconds),
        write_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.write_timeout_seconds),
        pool_timeout_seconds=_parse_env_float(_ENV_NAMES[3], defaults.pool_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


def cap_timeout(base: httpx.Timeout, remaining: Optional[float]) -> httpx.Timeout:
    """Shrink every phase of ``base`` to at most ``remaining`` seconds.

    Used to make a caller's deadline bound each blocking I/O step.
    """
    if remaining is None:
        return base

    def _cap(value: Optional[float]) -> float:
        return remaining if value is None else min(value, remaining)

    return httpx.Timeout(
        connect=_cap(base.connect),
        read=_cap(base.read),
        write=_cap(base.write),
        pool=_cap(base.pool),
    )


__all__ = ["TimeoutConfig", "get_timeout_config", "cap_timeout"]
