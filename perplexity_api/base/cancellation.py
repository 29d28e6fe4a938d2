"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` is the caller-supplied cancellation/deadline handle
accepted by ``PerplexityClient.chat_completion``; ``CancelledError`` is raised
when a call observes it.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
