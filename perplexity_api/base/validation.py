"""Request validation.

Checks the cross-field rules of a :class:`ChatCompletionRequest` before any
payload is built or any connection opened. Each violation raises
:class:`RequestValidationError` with a message naming the rule.
"""
from __future__ import annotations

from .errors import RequestValidationError
from .models import ChatCompletionRequest, MessageRole


def validate_request(request: ChatCompletionRequest) -> None:
    """Validate ``request`` in place; it is never mutated.

    Rules:
        - ``model`` is non-empty.
        - ``messages`` is non-empty.
        - the last message is from the user.
        - ``presence_penalty`` and ``frequency_penalty`` are not both set to
          non-zero values.

    Raises:
        RequestValidationError: On the first rule that fails.
    """
    if not request.model:
        raise RequestValidationError("model is required")
    if not request.messages:
        raise RequestValidationError("at least one message is required")
    last_role = getattr(request.messages[-1], "role", None)
    if last_role != MessageRole.USER:
        raise RequestValidationError("the last message must be from the user")
    if request.presence_penalty and request.frequency_penalty:
        raise RequestValidationError(
            "presence_penalty and frequency_penalty are incompatible; only one should be set"
        )


__all__ = ["validate_request"]
