"""
Wire DTO for chat completion requests and the request -> payload transform.

Purpose
-------
``ChatCompletionRequest`` carries a Python callable in ``stream`` that cannot
be serialized. Rather than hooking serialization, :func:`build_payload` is an
explicit transform step: it copies every wire field into a plain pydantic
DTO and derives the boolean ``stream`` flag solely from whether a callback
was supplied. :meth:`ChatCompletionPayload.to_wire` then applies the
omission rules and returns the JSON-ready mapping.

Omission rules
--------------
- Always present: ``model``, ``messages``, ``return_citations``,
  ``return_images``, ``return_related_questions``.
- Omitted when unset or zero: ``max_tokens``, ``temperature``, ``top_p``,
  ``top_k``, ``presence_penalty``, ``frequency_penalty``,
  ``search_recency_filter``.
- ``search_domain_filter`` is omitted when unset or empty.
- ``stream`` is emitted (as ``true``) only when a callback was supplied.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import RequestValidationError
from ..models import ChatCompletionRequest, Message, RecencyFilter

_ALWAYS_PRESENT = frozenset(
    {"model", "messages", "return_citations", "return_images", "return_related_questions"}
)


class ChatCompletionPayload(BaseModel):
    """Plain data-transfer representation of a chat completion request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    model: str = Field(..., min_length=1)
    messages: List[Message] = Field(..., min_length=1)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    return_citations: bool = False
    search_domain_filter: Optional[List[str]] = None
    return_images: bool = False
    return_related_questions: bool = False
    search_recency_filter: Optional[RecencyFilter] = None
    top_k: Optional[int] = None
    stream: bool = False
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready request body with empty optional fields dropped.

        An unset or empty ``search_domain_filter`` is left out entirely rather
        than sent as ``null`` or ``[]``; the service then applies no filter.
        """
        data = self.model_dump(mode="json")
        return {
            key: value
            for key, value in data.items()
            if key in _ALWAYS_PRESENT or value not in (None, 0, 0.0, False, [], "")
        }


def build_payload(request: ChatCompletionRequest) -> ChatCompletionPayload:
    """Transform a request into its wire DTO.

    Parameters:
        request: Caller-facing request; assumed to have passed
            :func:`perplexity_api.base.validation.validate_request`.

    Returns:
        A ``ChatCompletionPayload`` whose ``stream`` is ``True`` exactly when
        ``request.stream`` holds a callback.

    Raises:
        RequestValidationError: When a field has the wrong type (for example a
            message with an unknown role).
    """
    model = getattr(request.model, "value", request.model)
    try:
        return ChatCompletionPayload(
            model=model,
            messages=list(request.messages),
            max_tokens=request.max_tokens,
            temperature=request.temperature,
            top_p=request.top_p,
            return_citations=request.return_citations,
            search_domain_filter=request.search_domain_filter,
            return_images=request.return_images,
            return_related_questions=request.return_related_questions,
            search_recency_filter=request.search_recency_filter,
            top_k=request.top_k,
            stream=request.stream is not None,
            presence_penalty=request.presence_penalty,
            frequency_penalty=request.frequency_penalty,
        )
    except ValidationError as e:
        raise RequestValidationError(f"invalid request: {e.errors()[0].get('msg', e)}", raw=e) from e


__all__ = ["ChatCompletionPayload", "build_payload"]
