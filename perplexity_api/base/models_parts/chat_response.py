"""
ChatCompletionResponse value returned by non-streaming calls.

Streaming calls deliver the same shape once per event; their choices carry
``delta`` fragments instead of complete messages and usually no usage.
"""
from __future__ import annotations

from typing import List

from pydantic import Field

from .choice import Choice
from .usage import Usage
from .wire_model import WireModel


class ChatCompletionResponse(WireModel):
    """Response (or streamed event) from the chat completion API.

    Attributes:
        id: Identifier generated uniquely for each response.
        model: Model used to generate the response.
        object: Object kind tag, ``chat.completion`` for whole responses.
        created: Unix timestamp (seconds) of when the completion was created.
        choices: Completion choices generated for the prompt.
        usage: Usage statistics for the request.
    """

    id: str = ""
    model: str = ""
    object: str = ""
    created: int = 0
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    def text(self) -> str:
        """Return the first choice's message content, or ``""``."""
        return self.choices[0].message.content if self.choices else ""

    def delta_text(self) -> str:
        """Return the concatenated delta content of every choice."""
        return "".join(choice.delta.content for choice in self.choices)


__all__ = ["ChatCompletionResponse"]
