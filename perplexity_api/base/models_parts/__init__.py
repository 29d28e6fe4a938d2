"""Model parts package: one value type per module."""

from .message_role import MessageRole
from .model_name import Model
from .recency_filter import RecencyFilter
from .finish_reason import FinishReason
from .wire_model import WireModel
from .message import Message
from .choice_message import ChoiceMessage
from .usage import Usage
from .choice import Choice
from .chat_response import ChatCompletionResponse
from .chat_request import ChatCompletionRequest, OnUpdateHandler

__all__ = [
    "MessageRole",
    "Model",
    "RecencyFilter",
    "FinishReason",
    "WireModel",
    "Message",
    "ChoiceMessage",
    "Usage",
    "Choice",
    "ChatCompletionResponse",
    "ChatCompletionRequest",
    "OnUpdateHandler",
]
