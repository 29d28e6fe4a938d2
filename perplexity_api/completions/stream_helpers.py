"""Server-sent events loop for streamed completions.

Purpose:
    Turn the body of a ``text/event-stream`` response into a sequence of
    ``ChatCompletionResponse`` events handed to the caller's callback,
    synchronously and in arrival order. Nothing is read ahead of the
    callback: the next line is only pulled once the callback has returned.

Framing:
    - blank line: keep-alive, skipped
    - ``data: [DONE]``: end of stream, nothing more is read
    - ``data: <json>``: one event
    - anything else: ignored

Failure semantics:
    - a ``data:`` line that does not decode raises ``DecodeError`` with
      ``mid_stream=True``; events already delivered stay delivered
    - a failure reading the body raises ``StreamReadError``
    - a cancelled token raises ``CancelledError`` before the next line
    - exceptions raised by the callback propagate unchanged

This module does not close the response; the caller owns its lifetime.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, Optional

import httpx
from pydantic import ValidationError

from ..base.cancellation import CancellationToken, CancelledError
from ..base.constants import SSE_DATA_PREFIX, SSE_DONE_LINE
from ..base.errors import DecodeError, ErrorCode, StreamReadError
from ..base.models import ChatCompletionResponse, OnUpdateHandler


@dataclass
class StreamMetrics:
    """Counters collected while consuming one stream."""

    emitted: int = 0
    time_to_first_event_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None


def iter_stream_lines(response: httpx.Response, cancel: Optional[CancellationToken] = None) -> Iterator[str]:
    """Yield decoded lines of ``response``, translating read failures.

    Read failures are raised here, while exceptions raised by the consumer
    of this generator never pass through it, so read errors and decode or
    callback errors stay distinct.

    Raises:
        StreamReadError: The transport failed while reading the body.
        CancelledError: ``cancel`` was cancelled, checked before every line
            and when a read fails after the deadline passed.
    """
    lines = response.iter_lines()
    while True:
        if cancel is not None:
            cancel.raise_if_cancelled()
        try:
            line = next(lines)
        except StopIteration:
            return
        except (httpx.HTTPError, httpx.StreamError) as e:
            if cancel is not None and cancel.cancelled:
                raise CancelledError(cancel.reason or "operation cancelled") from e
            raise StreamReadError(
                f"error reading streaming response: {e}",
                code=ErrorCode.TIMEOUT if isinstance(e, httpx.TimeoutException) else ErrorCode.STREAM_READ,
                raw=e,
            ) from e
        yield line


def decode_event(data: str) -> ChatCompletionResponse:
    """Decode the JSON text of one ``data:`` line.

    Raises:
        DecodeError: With ``mid_stream=True`` when ``data`` is not a valid
            event document.
    """
    try:
        return ChatCompletionResponse.model_validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"failed to decode streaming event: {e}", mid_stream=True, raw=e) from e


def consume_event_stream(
    response: httpx.Response,
    on_update: OnUpdateHandler,
    *,
    cancel: Optional[CancellationToken] = None,
    metrics: Optional[StreamMetrics] = None,
) -> StreamMetrics:
    """Run the read loop until the sentinel, end of data, or an error.

    Parameters:
        response: Streaming response whose status and content type were
            already checked.
        on_update: Caller callback, invoked once per decoded event.
        cancel: Optional cancellation token observed between lines.
        metrics: Optional metrics object to fill; a new one is created
            otherwise.

    Returns:
        The metrics of the run (``emitted`` is the number of callback
        invocations).
    """
    metrics = metrics if metrics is not None else StreamMetrics()
    started = time.perf_counter()
    try:
        for line in iter_stream_lines(response, cancel):
            if not line:
                continue
            if line == SSE_DONE_LINE:
                break
            if not line.startswith(SSE_DATA_PREFIX):
                continue
            event = decode_event(line[len(SSE_DATA_PREFIX):])
            if metrics.emitted == 0:
                metrics.time_to_first_event_ms = (time.perf_counter() - started) * 1000.0
            metrics.emitted += 1
            on_update(event)
    finally:
        metrics.total_duration_ms = (time.perf_counter() - started) * 1000.0
    return metrics


__all__ = [
    "StreamMetrics",
    "iter_stream_lines",
    "decode_event",
    "consume_event_stream",
]
