"""Cooperative cancellation token with an optional deadline.

The client never imposes timeouts of its own. Callers thread a token through
``chat_completion``; the client checks it before sending and between stream
lines, and caps the httpx timeout of the exchange to the remaining deadline.
"""

from __future__ import annotations

import time
from threading import Lock
from typing import List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """A thread-safe cancellation token with cascading children.

    Parameters:
        parent: Optional parent; cancelling it cancels this token too.
        timeout: Optional number of seconds after which the token reports
            itself cancelled with reason ``"deadline exceeded"``.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None, timeout: Optional[float] = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if timeout is not None:
            self._state.deadline = time.monotonic() + max(0.0, float(timeout))
        if parent is not None:
            parent_deadline = parent.deadline
            if parent_deadline is not None and (
                self._state.deadline is None or parent_deadline < self._state.deadline
            ):
                self._state.deadline = parent_deadline
            parent.link_child(self)

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Return a fresh token that expires ``seconds`` from now."""
        return cls(timeout=seconds)

    @property
    def deadline(self) -> Optional[float]:
        """Monotonic deadline timestamp, if any."""
        return self._state.deadline

    @property
    def cancelled(self) -> bool:
        """Whether cancellation was requested or the deadline has passed."""
        if self._state.cancelled:
            return True
        deadline = self._state.deadline
        return deadline is not None and time.monotonic() >= deadline

    @property
    def reason(self) -> str | None:
        if self._state.cancelled:
            return self._state.reason
        if self.cancelled:
            return "deadline exceeded"
        return None

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or ``None``."""
        deadline = self._state.deadline
        if deadline is None:
            return None
        return max(0.0, deadline - time.monotonic())

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation and cascade to children. Idempotent."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link ``token`` so that cancelling this token cancels it."""
        with self._lock:
            self._children.append(token)
            already = self._state.cancelled
            reason = self._state.reason
        if already:
            token.cancel(reason)
        return token

    def child(self, *, timeout: Optional[float] = None) -> "CancellationToken":
        return CancellationToken(parent=self, timeout=timeout)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` when the token is cancelled."""
        if self.cancelled:
            raise CancelledError(self.reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self.cancelled}, "
            f"reason={self.reason!r}, remaining={self.remaining()!r})"
        )


__all__ = ["CancellationToken"]
