"""Wire data-transfer objects.

Pydantic DTOs describing exactly what goes on the wire, kept apart from the
caller-facing request type.
"""

from .chat import ChatCompletionPayload, build_payload

__all__ = ["ChatCompletionPayload", "build_payload"]
