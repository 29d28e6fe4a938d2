"""Unit tests for cooperative cancellation primitives and their use by the client.

Covers idempotent cancel, cascade to children, late link of child after
parent cancel, deadlines, and cancellation observed by the stream loop.
"""
from __future__ import annotations

import time

import httpx
import pytest

from perplexity_api import ChatCompletionRequest, Message
from perplexity_api.base.cancellation import (
    CancellationToken,
    CancelledError,
)

from conftest import completion_document, delta_event, event_line


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    # idempotent second call
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.cancel("terminate")
    with pytest.raises(CancelledError):
        token.raise_if_cancelled()


def test_expired_deadline_reports_cancelled():
    token = CancellationToken.with_timeout(0)
    assert token.cancelled is True  # nosec B101 - pytest assert in tests
    assert token.reason == "deadline exceeded"  # nosec B101 - pytest assert in tests
    assert token.remaining() == 0.0  # nosec B101 - pytest assert in tests


def test_child_inherits_earlier_parent_deadline():
    parent = CancellationToken(timeout=5)
    child = parent.child(timeout=60)
    assert child.deadline == parent.deadline  # nosec B101 - pytest assert in tests
    assert CancellationToken().remaining() is None  # nosec B101 - pytest assert in tests


def test_cancelled_token_stops_before_sending(make_client, document_reply):
    respond, _ = document_reply({})
    client, recorder = make_client(respond)
    token = CancellationToken()
    token.cancel("user abort")

    with pytest.raises(CancelledError):
        client.chat_completion(ChatCompletionRequest(model="m", messages=[Message.user("q")]), cancel=token)
    assert recorder.requests == []  # nosec B101 - pytest assert in tests


def test_cancel_from_callback_stops_stream_and_releases(make_client, sse_reply):
    respond, stream = sse_reply([event_line(delta_event(str(i))) for i in range(5)])
    client, _ = make_client(respond)
    token = CancellationToken()
    seen = []

    def on_update(event):
        seen.append(event)
        if len(seen) == 2:
            token.cancel("enough")

    with pytest.raises(CancelledError):
        client.chat_completion(
            ChatCompletionRequest(model="m", messages=[Message.user("q")], stream=on_update),
            cancel=token,
        )
    assert len(seen) == 2  # nosec B101 - pytest assert in tests
    assert stream.close_count == 1  # nosec B101 - pytest assert in tests


def test_deadline_caps_transport_timeout(make_client, document_reply):
    respond, _ = document_reply(completion_document())
    client, recorder = make_client(respond)

    client.chat_completion(
        ChatCompletionRequest(model="m", messages=[Message.user("q")]),
        cancel=CancellationToken.with_timeout(2.0),
    )

    timeout = recorder.requests[-1].extensions["timeout"]
    assert 0 < timeout["read"] <= 2.0  # nosec B101 - pytest assert in tests
    assert 0 < timeout["connect"] <= 2.0  # nosec B101 - pytest assert in tests


def test_per_call_timeout_is_forwarded(make_client, document_reply):
    respond, _ = document_reply(completion_document())
    client, recorder = make_client(respond)

    client.chat_completion(ChatCompletionRequest(model="m", messages=[Message.user("q")]), timeout=7.5)

    assert recorder.requests[-1].extensions["timeout"]["read"] == 7.5  # nosec B101 - pytest assert in tests


def test_failure_after_deadline_is_reported_as_cancellation(make_client):
    token = CancellationToken(timeout=0.05)

    def respond(request):
        time.sleep(0.1)
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = make_client(respond)
    with pytest.raises(CancelledError):
        client.chat_completion(ChatCompletionRequest(model="m", messages=[Message.user("q")]), cancel=token)
