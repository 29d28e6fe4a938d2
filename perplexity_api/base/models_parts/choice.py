"""A single completion choice generated by the model."""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import Field, field_validator

from .choice_message import ChoiceMessage
from .finish_reason import FinishReason
from .wire_model import WireModel


class Choice(WireModel):
    """One completion choice.

    Attributes:
        index: Position of this choice in the response.
        finish_reason: :class:`FinishReason` member when the value is known,
            the raw string for values this client does not know yet, or
            ``None`` while the choice is still streaming.
        message: Complete generated message (non-streaming responses).
        delta: Newly streamed fragment (streaming events).
    """

    index: int = 0
    finish_reason: Optional[Union[FinishReason, str]] = None
    message: ChoiceMessage = Field(default_factory=ChoiceMessage)
    delta: ChoiceMessage = Field(default_factory=ChoiceMessage)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def _known_finish_reason(cls, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, str) and not isinstance(value, FinishReason):
            try:
                return FinishReason(value)
            except ValueError:
                return value
        return value


__all__ = ["Choice"]
