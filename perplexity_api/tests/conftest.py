"""Shared fixtures for the client test suite.

The doubles here sit at the httpx transport seam: ``httpx.MockTransport``
routes requests to a handler, and ``CountingStream`` serves the response body
while recording how many chunks were pulled and how many times the body was
closed. No test touches the network.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterator, List, Optional

import httpx
import pytest

from perplexity_api.base.http import close_all_clients
from perplexity_api.completions import PerplexityClient
from perplexity_api.config import reset_config_cache

ENV_VARS = (
    "PERPLEXITY_API_TOKEN",
    "PERPLEXITY_API_KEY",
    "PERPLEXITY_BASE_URL",
    "PERPLEXITY_MODEL",
    "PERPLEXITY_SYSTEM_MESSAGE",
    "PERPLEXITY_CONFIG_FILE",
    "PERPLEXITY_LOG_LEVEL",
)


class CountingStream(httpx.SyncByteStream):
    """Response body double.

    Parameters:
        chunks: Byte chunks served in order.
        fail_after: When set, raise ``httpx.ReadError`` once this many chunks
            have been served.
    """

    def __init__(self, chunks: List[bytes], *, fail_after: Optional[int] = None) -> None:
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self.consumed = 0
        self.close_count = 0

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self._chunks:
            if self._fail_after is not None and self.consumed >= self._fail_after:
                raise httpx.ReadError("connection reset while reading")
            self.consumed += 1
            yield chunk
        if self._fail_after is not None and self.consumed >= self._fail_after:
            raise httpx.ReadError("connection reset while reading")

    def close(self) -> None:
        self.close_count += 1


def event_line(payload: Any) -> bytes:
    """Frame ``payload`` as one ``data:`` line (plus the blank separator)."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {text}\n\n".encode("utf-8")


def delta_event(content: str, *, index: int = 0, finish_reason: Optional[str] = None) -> dict:
    return {
        "id": "evt-1",
        "model": "llama-3.1-sonar-small-128k-online",
        "object": "chat.completion.chunk",
        "created": 1724000000,
        "choices": [
            {
                "index": index,
                "finish_reason": finish_reason,
                "delta": {"role": "assistant", "content": content},
            }
        ],
    }


def completion_document(content: str = "Hello there") -> dict:
    return {
        "id": "resp-123",
        "model": "llama-3.1-sonar-small-128k-online",
        "object": "chat.completion",
        "created": 1724000000,
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
                "delta": {"role": "assistant", "content": ""},
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
    }


class Recorder:
    """Transport handler that records requests and replays a canned reply."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear client environment variables and config caches around each test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def make_client() -> Callable[..., tuple]:
    """Factory returning ``(client, recorder)`` wired to a mock transport.

    ``respond`` builds the reply for each request.
    """

    def _make(respond: Callable[[httpx.Request], httpx.Response], **kwargs: Any):
        recorder = Recorder(respond)
        http = httpx.Client(transport=httpx.MockTransport(recorder))
        return PerplexityClient("pplx-secret-token", http_client=http, **kwargs), recorder

    return _make


@pytest.fixture()
def sse_reply() -> Callable[..., tuple]:
    """Factory returning ``(respond, stream)`` serving an event stream."""

    def _make(chunks: List[bytes], *, status: int = 200, content_type: str = "text/event-stream", fail_after=None):
        stream = CountingStream(chunks, fail_after=fail_after)

        def respond(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, headers={"content-type": content_type}, stream=stream)

        return respond, stream

    return _make


@pytest.fixture()
def document_reply() -> Callable[..., tuple]:
    """Factory returning ``(respond, stream)`` serving one JSON document."""

    def _make(body: Any, *, status: int = 200, content_type: str = "application/json"):
        raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        stream = CountingStream([raw])

        def respond(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, headers={"content-type": content_type}, stream=stream)

        return respond, stream

    return _make
