"""Message or delta fragment carried by a response choice."""
from __future__ import annotations

from typing import Optional

from .message_role import MessageRole
from .wire_model import WireModel


class ChoiceMessage(WireModel):
    """Model output attached to a :class:`Choice`.

    In a complete response this is the full assistant message; in a streamed
    event the ``delta`` instance holds only the newly generated text. Either
    field may be missing on the wire, hence the defaults.
    """

    role: Optional[MessageRole] = None
    content: str = ""


__all__ = ["ChoiceMessage"]
