"""
ChatCompletionRequest, the caller-facing request value.

Holds everything the caller chooses for one call, including the optional
``stream`` callback. It is never serialized directly: the builder in
``perplexity_api.base.dto.chat`` turns it into a plain wire payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .chat_response import ChatCompletionResponse
from .message import Message
from .model_name import Model
from .recency_filter import RecencyFilter

OnUpdateHandler = Callable[[ChatCompletionResponse], None]


@dataclass
class ChatCompletionRequest:
    """Request for a chat completion.

    Attributes:
        model: Model that will complete the prompt. Required.
        messages: Conversation so far; the last message must be from the
            user. Required.
        max_tokens: Maximum number of completion tokens returned.
        temperature: Randomness in ``[0, 2)``; service default ``0.2``.
        top_p: Nucleus sampling threshold in ``[0, 1]``; service default
            ``0.9``. Adjust either ``top_k`` or ``top_p``, not both.
        return_citations: Whether the response should include citations.
        search_domain_filter: Domains the online model may cite. Prefix a
            domain with ``-`` to blocklist it.
        return_images: Whether the response should include images.
        return_related_questions: Whether the response should include
            related questions.
        search_recency_filter: Restricts search results to this interval.
        top_k: Highest top-k filtering in ``[0, 2048]``; 0 disables it.
        stream: Callback invoked with each streamed event. When set, the
            service streams and ``chat_completion`` returns ``None``.
        presence_penalty: In ``[-2, 2]``; incompatible with
            ``frequency_penalty``.
        frequency_penalty: Multiplicative penalty greater than 0;
            incompatible with ``presence_penalty``.

    Unset (``None``) and zero-valued numeric options are left off the wire.
    """

    model: Union[Model, str]
    messages: List[Message]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    return_citations: bool = False
    search_domain_filter: Optional[List[str]] = None
    return_images: bool = False
    return_related_questions: bool = False
    search_recency_filter: Optional[RecencyFilter] = None
    top_k: Optional[int] = None
    stream: Optional[OnUpdateHandler] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None

    @property
    def streaming(self) -> bool:
        """Whether a stream callback was supplied."""
        return self.stream is not None


__all__ = ["ChatCompletionRequest", "OnUpdateHandler"]
