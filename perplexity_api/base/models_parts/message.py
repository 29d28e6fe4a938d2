"""
Message value object used in requests.

A message is immutable once constructed; an ordered list of them forms the
conversation sent with each request.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .message_role import MessageRole


class Message(BaseModel):
    """One turn of the conversation.

    Attributes:
        role: Speaker of this turn (``system``, ``user`` or ``assistant``).
            Plain strings are accepted and coerced to :class:`MessageRole`.
        content: Text of the turn.

    Note:
        The service does not strip special tokens from message content. If
        prompt injection is a concern, check inputs before sending them.
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=MessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)


__all__ = ["Message"]
