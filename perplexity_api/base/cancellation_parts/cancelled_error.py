"""Cancellation error type.

Raised when a call observes that its caller-supplied
:class:`CancellationToken` was cancelled or its deadline passed.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Kept apart from :class:`PerplexityError` so callers can tell their own
    cancellation from a failure of the service or transport.
    """

__all__ = ["CancelledError"]
