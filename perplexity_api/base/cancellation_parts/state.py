"""Internal state holder for cancellation tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Mutable state of one token.

    ``deadline`` is a ``time.monotonic()`` timestamp or ``None``.
    """

    cancelled: bool = False
    reason: Optional[str] = None
    deadline: Optional[float] = None


__all__ = ["State"]
