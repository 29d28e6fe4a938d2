"""Roles a chat message may carry."""
from __future__ import annotations

from enum import Enum


class MessageRole(str, Enum):
    """Role of the speaker in one turn of the conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


__all__ = ["MessageRole"]
