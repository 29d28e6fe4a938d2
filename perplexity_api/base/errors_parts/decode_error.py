"""Decode error for malformed JSON documents and streaming events."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .perplexity_error import PerplexityError


@dataclass(eq=False)
class DecodeError(PerplexityError):
    """A response body or one ``data:`` event failed to decode.

    Attributes:
        mid_stream: ``True`` when the failing payload was a streaming event;
            events delivered before it remain valid.
    """

    code: ErrorCode = ErrorCode.DECODE
    mid_stream: bool = False


__all__ = ["DecodeError"]
