"""Response protocol handler for chat completions.

Purpose:
    Given the ``httpx.Response`` of a validated request (opened with
    ``stream=True`` so no body has been read yet) and the request's optional
    stream callback, return one decoded ``ChatCompletionResponse`` or drive
    the event-stream loop, releasing the response on every exit path.

States:
    1. status check: non-2xx raises ``APIError``
    2. content-type classification: ``text/event-stream`` means streaming
    3. single document: read, decode, return
    4. streaming precondition: no callback raises ``UsageError`` before a
       single body byte is read
    5. streaming loop: see ``stream_helpers``; returns ``None``

Error reporting keeps the undifferentiated ``"API error: ..."`` message for
every status while ``APIError.code`` distinguishes client and server
failures.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..base.cancellation import CancellationToken
from ..base.constants import EVENT_STREAM_CONTENT_TYPE, STREAM_HANDLER_REQUIRED
from ..base.errors import (
    APIError,
    DecodeError,
    TransportError,
    UsageError,
    classify_exception,
    classify_status,
)
from ..base.models import ChatCompletionResponse, OnUpdateHandler
from .stream_helpers import StreamMetrics, consume_event_stream


def _error_message_from_body(body: bytes) -> Optional[str]:
    """Extract the service error message from an error body, if any.

    Accepts ``{"error": "<message>"}`` and the richer
    ``{"error": {"message": "<message>", ...}}`` shape. Returns ``None`` when
    the body is not JSON, not one of these shapes, or the message is empty.
    """
    try:
        data: Any = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        error = error.get("message")
    if isinstance(error, str) and error:
        return error
    return None


def raise_for_api_error(response: httpx.Response) -> None:
    """Raise ``APIError`` when ``response`` does not carry a 2xx status.

    The full body is read to look for a structured error payload; a failure
    to read it falls back to the generic status message.
    """
    if response.is_success:
        return
    status = response.status_code
    code = classify_status(status)
    try:
        body = response.read()
    except (httpx.HTTPError, httpx.StreamError):
        body = b""
    message = _error_message_from_body(body)
    if message is not None:
        raise APIError(f"API error: {message}", code=code, status_code=status)
    status_text = f"{status} {response.reason_phrase}".strip()
    raise APIError(f"unexpected status code: {status_text}", code=code, status_code=status)


def is_event_stream(response: httpx.Response) -> bool:
    """Return True when the declared content type is ``text/event-stream``.

    Media type parameters (``; charset=utf-8``) are allowed.
    """
    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == EVENT_STREAM_CONTENT_TYPE


def decode_document(response: httpx.Response) -> ChatCompletionResponse:
    """Read the whole body and decode it as one ``ChatCompletionResponse``.

    Raises:
        TransportError: The body could not be read.
        DecodeError: The body is not a valid response document.
    """
    try:
        body = response.read()
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise TransportError(f"failed to read response body: {e}", code=classify_exception(e), raw=e) from e
    try:
        return ChatCompletionResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"failed to decode response: {e}", raw=e) from e


def handle_response(
    response: httpx.Response,
    on_update: Optional[OnUpdateHandler],
    *,
    cancel: Optional[CancellationToken] = None,
    metrics: Optional[StreamMetrics] = None,
) -> Optional[ChatCompletionResponse]:
    """Classify ``response`` and produce its result.

    Parameters:
        response: Unread streaming-mode response; closed before returning.
        on_update: The request's stream callback, or ``None``.
        cancel: Optional cancellation token observed by the stream loop.
        metrics: Optional metrics object filled by the stream loop.

    Returns:
        The decoded response for single-document replies; ``None`` for
        event streams (the events went to ``on_update``).

    Raises:
        APIError, TransportError, DecodeError, UsageError, StreamReadError,
        CancelledError, or whatever ``on_update`` raises.
    """
    try:
        raise_for_api_error(response)
        if not is_event_stream(response):
            return decode_document(response)
        if on_update is None:
            raise UsageError(STREAM_HANDLER_REQUIRED, status_code=response.status_code)
        consume_event_stream(response, on_update, cancel=cancel, metrics=metrics)
        return None
    finally:
        response.close()


__all__ = [
    "raise_for_api_error",
    "is_event_stream",
    "decode_document",
    "handle_response",
]
