"""
Client value types public surface.

This module re-exports the one-class-per-file implementations under
``perplexity_api.base.models_parts``.
"""

from .models_parts import (
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

__all__ = [
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
]
