"""Token usage statistics."""
from __future__ import annotations

from .wire_model import WireModel


class Usage(WireModel):
    """Usage statistics for a completion request.

    Attributes:
        prompt_tokens: Tokens provided in the request prompt.
        completion_tokens: Tokens generated in the response output.
        total_tokens: Prompt plus completion tokens.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


__all__ = ["Usage"]
