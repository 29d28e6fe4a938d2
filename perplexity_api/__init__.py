"""perplexity_api package

Python client for the Perplexity chat completions API.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`PerplexityClient`
    - Values: :class:`ChatCompletionRequest`, :class:`ChatCompletionResponse`,
      :class:`Message`, :class:`Choice`, :class:`ChoiceMessage`,
      :class:`Usage`, and the enums :class:`MessageRole`, :class:`Model`,
      :class:`RecencyFilter`, :class:`FinishReason`
    - Errors: :class:`PerplexityError` and its subclasses, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`

Example::

    from perplexity_api import ChatCompletionRequest, Message, PerplexityClient

    client = PerplexityClient(token)
    reply = client.chat_completion(
        ChatCompletionRequest(
            model="llama-3.1-sonar-small-128k-online",
            messages=[Message.system("Be precise."), Message.user("Why is the sky blue?")],
        )
    )
    print(reply.text())

Pass ``stream=callback`` on the request to receive events incrementally; the
call then returns ``None``.
"""

from .base.constants import CLIENT_VERSION, DEFAULT_BASE_URL
from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    APIError,
    DecodeError,
    ErrorCode,
    PerplexityError,
    RequestValidationError,
    StreamReadError,
    TransportError,
    UsageError,
)
from .base.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    ChoiceMessage,
    FinishReason,
    Message,
    MessageRole,
    Model,
    OnUpdateHandler,
    RecencyFilter,
    Usage,
)
from .completions import PerplexityClient

__version__ = CLIENT_VERSION

__all__ = [
    "__version__",
    "DEFAULT_BASE_URL",
    # Client
    "PerplexityClient",
    # Values
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "ChoiceMessage",
    "FinishReason",
    "Message",
    "MessageRole",
    "Model",
    "OnUpdateHandler",
    "RecencyFilter",
    "Usage",
    # Errors
    "ErrorCode",
    "PerplexityError",
    "RequestValidationError",
    "TransportError",
    "APIError",
    "DecodeError",
    "StreamReadError",
    "UsageError",
    # Cancellation
    "CancellationToken",
    "CancelledError",
]
