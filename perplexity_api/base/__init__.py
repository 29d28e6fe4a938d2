"""
Base package

Shared building blocks for the completions client:
- Models: caller-facing request and decoded response value types
- DTO + validation: the request -> wire payload transform
- Errors: the client error taxonomy
- Transport: pooled httpx clients, timeouts, cooperative cancellation
- Logging: structured JSON logging
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIError,
    DecodeError,
    ErrorCode,
    PerplexityError,
    RequestValidationError,
    StreamReadError,
    TransportError,
    UsageError,
)
from .models import (
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
from .dto import ChatCompletionPayload, build_payload
from .validation import validate_request
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "MessageRole",
    "Model",
    "RecencyFilter",
    "FinishReason",
    "Message",
    "ChoiceMessage",
    "Usage",
    "Choice",
    "ChatCompletionResponse",
    "ChatCompletionRequest",
    "OnUpdateHandler",
    # Builder
    "ChatCompletionPayload",
    "build_payload",
    "validate_request",
    # Errors
    "ErrorCode",
    "PerplexityError",
    "RequestValidationError",
    "TransportError",
    "APIError",
    "DecodeError",
    "StreamReadError",
    "UsageError",
    # Timeouts & Cancellation
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
]
