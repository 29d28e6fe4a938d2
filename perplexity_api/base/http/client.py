"""Shared HTTP client pool for the Perplexity client.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances so that
    separate ``PerplexityClient`` objects share connections instead of each
    allocating their own. Timeouts derive exclusively from
    :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``purpose`` (e.g. ``"chat"``). Base URLs are not
      bound to the pooled client; callers pass absolute URLs.
    - All clients are closed at interpreter exit via ``atexit``. Tests may call
      :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "chat") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose``.

    The first request for a purpose creates a client configured with the
    timeouts from :func:`get_timeout_config`; later requests reuse it.
    Creation is guarded by a re-entrant lock.
    """
    client = _CLIENTS.get(purpose)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=get_timeout_config().to_httpx())
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # nosec B110 - pool teardown failures are not actionable
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
