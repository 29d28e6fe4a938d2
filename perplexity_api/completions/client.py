"""Perplexity chat completions client.

Summary:
- Validates and serializes the request before any network activity
- Sends one ``POST /chat/completions`` through ``httpx`` (pooled client by
  default, or one supplied by the caller)
- Hands the response to the protocol handler, which returns a decoded
  document or streams events into the request's callback

Timeouts & cancellation:
- No timeouts or retries of its own. A caller ``CancellationToken`` is
  observed before sending and between stream lines, and its remaining
  deadline caps every httpx timeout of the exchange. ``timeout`` overrides
  the transport budget for one call.

Errors & observability:
- Transport failures are wrapped in ``TransportError``; every other failure
  is raised by the helpers with its own error type
- Structured ``chat.*`` / ``stream.*`` events are logged; the credential
  never is

Separate calls share no mutable state, so one client may be used from many
threads.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from ..base.cancellation import CancellationToken, CancelledError
from ..base.constants import CHAT_COMPLETIONS_PATH, DEFAULT_BASE_URL, MISSING_API_KEY_ERROR
from ..base.errors import PerplexityError, TransportError, UsageError, classify_exception
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatCompletionRequest, ChatCompletionResponse
from ..base.timeouts import cap_timeout
from ..config import get_client_config
from .helpers import CompletionsRequestMixin
from .response_helpers import handle_response
from .stream_helpers import StreamMetrics

TimeoutTypes = Union[float, httpx.Timeout, None]


class PerplexityClient(CompletionsRequestMixin):
    """Client for the Perplexity chat completions API.

    Parameters:
        token: API token sent as a bearer credential. Required.
        http_client: Optional ``httpx.Client``; when omitted a pooled client
            configured from ``get_timeout_config()`` is used. A supplied
            client stays owned by the caller.
        base_url: API base URL; defaults to ``https://api.perplexity.ai``.

    Raises:
        UsageError: When ``token`` is empty.
    """

    def __init__(
        self,
        token: str,
        *,
        http_client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
    ) -> None:
        if not token:
            raise UsageError(MISSING_API_KEY_ERROR)
        self._token = token
        self._http = http_client if http_client is not None else get_httpx_client("chat")
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._logger = get_logger("perplexity.completions")

    @classmethod
    def from_env(
        cls,
        *,
        http_client: Optional[httpx.Client] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "PerplexityClient":
        """Build a client from :func:`get_client_config`.

        Raises:
            UsageError: When no token is configured anywhere.
        """
        cfg = get_client_config(overrides)
        token = cfg.get("api_token")
        if not token:
            raise UsageError(MISSING_API_KEY_ERROR)
        return cls(token, http_client=http_client, base_url=cfg.get("base_url"))

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"PerplexityClient(base_url={self._base_url!r})"

    def chat_completion(
        self,
        request: ChatCompletionRequest,
        *,
        cancel: Optional[CancellationToken] = None,
        timeout: TimeoutTypes = None,
    ) -> Optional[ChatCompletionResponse]:
        """Send a chat completion request.

        Parameters:
            request: The request. When ``request.stream`` holds a callback
                the service is asked to stream and each event is passed to
                the callback, in order, before this method returns.
            cancel: Optional cancellation token / deadline for this call.
            timeout: Optional transport timeout for this call (seconds or an
                ``httpx.Timeout``); the client default otherwise.

        Returns:
            The decoded response, or ``None`` when the reply was streamed.

        Raises:
            RequestValidationError: Invalid request; nothing was sent.
            TransportError: The exchange failed (connect, TLS, timeout...).
            APIError: Non-2xx status.
            DecodeError: Malformed response document or streaming event.
            StreamReadError: The event stream failed while being read.
            UsageError: Event stream received but no callback supplied.
            CancelledError: ``cancel`` was cancelled or its deadline passed.
        """
        model = str(getattr(request.model, "value", request.model) or "")
        ctx = LogContext(model=model or None, endpoint=CHAT_COMPLETIONS_PATH, streaming=request.streaming)
        prefix = "stream" if request.streaming else "chat"
        metrics = StreamMetrics()
        try:
            payload = self._prepare_payload(request)
            if cancel is not None:
                cancel.raise_if_cancelled()
            self._log_start(prefix, ctx, payload)
            response = self._send(payload, cancel=cancel, timeout=timeout)
            result = handle_response(response, request.stream, cancel=cancel, metrics=metrics)
        except PerplexityError as e:
            self._log_error(prefix, ctx, e.code.value, e, metrics)
            raise
        except CancelledError as e:
            self._log_error(prefix, ctx, "cancelled", e, metrics)
            raise
        self._log_end(prefix, ctx, result, metrics)
        return result

    def _send(self, payload: Dict[str, Any], *, cancel: Optional[CancellationToken], timeout: TimeoutTypes) -> httpx.Response:
        """Open the exchange in streaming mode; the body is left unread."""
        http_request = self._http.build_request(
            "POST",
            self._build_url(),
            json=payload,
            headers=self._build_headers(),
            timeout=self._effective_timeout(cancel, timeout),
        )
        try:
            return self._http.send(http_request, stream=True)
        except httpx.HTTPError as e:
            if cancel is not None and cancel.cancelled:
                raise CancelledError(cancel.reason or "operation cancelled") from e
            raise TransportError(str(e) or type(e).__name__, code=classify_exception(e), raw=e) from e

    def _effective_timeout(self, cancel: Optional[CancellationToken], timeout: TimeoutTypes):
        """Resolve the per-call timeout, capped by the caller's deadline."""
        remaining = cancel.remaining() if cancel is not None else None
        if timeout is None and remaining is None:
            return httpx.USE_CLIENT_DEFAULT
        if timeout is None:
            base = self._http.timeout
        elif isinstance(timeout, httpx.Timeout):
            base = timeout
        else:
            base = httpx.Timeout(timeout)
        return cap_timeout(base, remaining)

    def _log_start(self, prefix: str, ctx: LogContext, payload: Dict[str, Any]) -> None:
        normalized_log_event(
            self._logger,
            f"{prefix}.start",
            ctx,
            phase="start",
            emitted=None,
            tokens=None,
            message_count=len(payload.get("messages", [])),
            max_tokens=payload.get("max_tokens"),
            temperature=payload.get("temperature"),
        )

    def _log_end(self, prefix: str, ctx: LogContext, result: Optional[ChatCompletionResponse], metrics: StreamMetrics) -> None:
        if result is not None:
            ctx.response_id = result.id or None
            normalized_log_event(
                self._logger,
                f"{prefix}.end",
                ctx,
                phase="finalize",
                emitted=True,
                tokens=result.usage,
                choices=len(result.choices),
            )
            return
        normalized_log_event(
            self._logger,
            f"{prefix}.end",
            ctx,
            phase="finalize",
            emitted=metrics.emitted > 0,
            tokens=None,
            emitted_count=metrics.emitted,
            time_to_first_event_ms=metrics.time_to_first_event_ms,
            total_duration_ms=metrics.total_duration_ms,
        )

    def _log_error(self, prefix: str, ctx: LogContext, code: str, error: BaseException, metrics: StreamMetrics) -> None:
        normalized_log_event(
            self._logger,
            f"{prefix}.error",
            ctx,
            phase="finalize",
            emitted=metrics.emitted > 0,
            tokens=None,
            error_code=code,
            error=str(error),
            emitted_count=metrics.emitted,
        )


__all__ = ["PerplexityClient"]
