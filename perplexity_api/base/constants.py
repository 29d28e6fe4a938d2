"""Shared constants for the Perplexity client.

Central location for the endpoint, the streaming wire framing and sentinel
error strings, so no module carries its own copy of a magic string.

# pragma: allowlist secret
"""
from __future__ import annotations

# Client
CLIENT_VERSION = "0.1.0"

# Service endpoint
DEFAULT_BASE_URL = "https://api.perplexity.ai"
CHAT_COMPLETIONS_PATH = "/chat/completions"

# Server-sent events framing
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"
SSE_DATA_PREFIX = "data: "
SSE_DONE_LINE = "data: [DONE]"

# Error messages
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - sentinel name, not a secret
STREAM_HANDLER_REQUIRED = "streaming response received but no stream handler provided"

__all__ = [
    "CLIENT_VERSION",
    "DEFAULT_BASE_URL",
    "CHAT_COMPLETIONS_PATH",
    "EVENT_STREAM_CONTENT_TYPE",
    "SSE_DATA_PREFIX",
    "SSE_DONE_LINE",
    "MISSING_API_KEY_ERROR",
    "STREAM_HANDLER_REQUIRED",
]
