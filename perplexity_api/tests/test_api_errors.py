"""Non-2xx statuses and transport failures."""
from __future__ import annotations

import httpx
import pytest

from perplexity_api import (
    APIError,
    ChatCompletionRequest,
    ErrorCode,
    Message,
    PerplexityError,
    TransportError,
)


def _request(stream=None) -> ChatCompletionRequest:
    return ChatCompletionRequest(model="llama-3.1-70b-instruct", messages=[Message.user("q")], stream=stream)


def test_error_body_message_is_surfaced(make_client, document_reply):
    respond, stream = document_reply({"error": "Invalid model"}, status=400)
    client, _ = make_client(respond)

    with pytest.raises(APIError) as ei:
        client.chat_completion(_request())

    assert str(ei.value) == "API error: Invalid model"  # nosec B101 - pytest assert in tests
    assert ei.value.status_code == 400  # nosec B101 - pytest assert in tests
    assert ei.value.code is ErrorCode.VALIDATION  # nosec B101 - pytest assert in tests
    assert stream.close_count == 1  # nosec B101 - pytest assert in tests


def test_nested_error_object_message_is_surfaced(make_client, document_reply):
    body = {"error": {"message": "Invalid API key", "type": "invalid_request_error", "code": 401}}
    respond, _ = document_reply(body, status=401)
    client, _ = make_client(respond)

    with pytest.raises(APIError) as ei:
        client.chat_completion(_request())

    assert str(ei.value) == "API error: Invalid API key"  # nosec B101 - pytest assert in tests
    assert ei.value.code is ErrorCode.AUTH  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize(
    "status, body, expected",
    [
        (500, b"<html>boom</html>", "unexpected status code: 500 Internal Server Error"),
        (503, b"", "unexpected status code: 503 Service Unavailable"),
        (418, b'{"detail": "teapot"}', "unexpected status code: 418 I'm a teapot"),
        (429, b'{"error": ""}', "unexpected status code: 429 Too Many Requests"),
    ],
)
def test_unstructured_error_body_reports_status(make_client, document_reply, status, body, expected):
    respond, stream = document_reply(body, status=status, content_type="text/html")
    client, _ = make_client(respond)

    with pytest.raises(APIError) as ei:
        client.chat_completion(_request())

    assert str(ei.value) == expected  # nosec B101 - pytest assert in tests
    assert ei.value.status_code == status  # nosec B101 - pytest assert in tests
    assert stream.close_count == 1  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize(
    "status, code",
    [
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (409, ErrorCode.CONFLICT),
        (451, ErrorCode.CLIENT_ERROR),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (507, ErrorCode.SERVER_ERROR),
    ],
)
def test_error_code_distinguishes_client_and_server_failures(make_client, document_reply, status, code):
    respond, _ = document_reply({"error": "nope"}, status=status)
    client, _ = make_client(respond)

    with pytest.raises(APIError) as ei:
        client.chat_completion(_request())

    assert ei.value.code is code  # nosec B101 - pytest assert in tests
    assert str(ei.value) == "API error: nope"  # nosec B101 - pytest assert in tests


def test_error_status_on_event_stream_never_calls_back(make_client, sse_reply):
    respond, stream = sse_reply([b'{"error": "overloaded"}'], status=529)
    client, _ = make_client(respond)
    seen = []

    with pytest.raises(APIError) as ei:
        client.chat_completion(_request(seen.append))

    assert str(ei.value) == "API error: overloaded"  # nosec B101 - pytest assert in tests
    assert seen == []  # nosec B101 - pytest assert in tests
    assert stream.close_count == 1  # nosec B101 - pytest assert in tests


def test_connect_failure_is_wrapped(make_client):
    def respond(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(respond)
    with pytest.raises(TransportError) as ei:
        client.chat_completion(_request())

    assert isinstance(ei.value, PerplexityError)  # nosec B101 - pytest assert in tests
    assert ei.value.code is ErrorCode.TRANSPORT  # nosec B101 - pytest assert in tests
    assert isinstance(ei.value.__cause__, httpx.ConnectError)  # nosec B101 - pytest assert in tests
    assert ei.value.raw is ei.value.__cause__  # nosec B101 - pytest assert in tests


def test_timeout_is_wrapped_with_timeout_code(make_client):
    def respond(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = make_client(respond)
    with pytest.raises(TransportError) as ei:
        client.chat_completion(_request())
    assert ei.value.code is ErrorCode.TIMEOUT  # nosec B101 - pytest assert in tests
