"""Execution logic for ``perplexity-cli``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import PerplexityError, UsageError
from ..base.logging import configure_logger
from ..base.models import ChatCompletionRequest, ChatCompletionResponse, Message, RecencyFilter
from ..completions import PerplexityClient
from ..config import get_client_config

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_TOKEN = 2


def build_request(args: argparse.Namespace, cfg: dict, out: TextIO) -> ChatCompletionRequest:
    """Assemble the request; the stream callback prints delta text to ``out``."""

    def _print_delta(event: ChatCompletionResponse) -> None:
        out.write(event.delta_text())
        out.flush()

    messages = []
    system_message = args.system if args.system is not None else cfg.get("system_message")
    if system_message:
        messages.append(Message.system(system_message))
    messages.append(Message.user(args.prompt))
    return ChatCompletionRequest(
        model=args.model or cfg.get("model", ""),
        messages=messages,
        max_tokens=args.max_tokens,
        temperature=args.temperature,
        search_recency_filter=RecencyFilter(args.recency) if args.recency else None,
        stream=_print_delta if args.stream else None,
    )


def handle_ask(
    args: argparse.Namespace,
    *,
    client: Optional[PerplexityClient] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Send one prompt and print the reply; returns the exit code.

    ``out`` and ``err`` default to the current ``sys.stdout`` / ``sys.stderr``.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    if args.log_level:
        configure_logger(level=args.log_level)
    cfg = get_client_config({"base_url": args.base_url})
    if client is None:
        try:
            client = PerplexityClient.from_env(overrides={"base_url": args.base_url})
        except UsageError:
            err.write("Please set the PERPLEXITY_API_TOKEN environment variable.\n")
            return EXIT_NO_TOKEN

    request = build_request(args, cfg, out)
    try:
        response = client.chat_completion(request, cancel=CancellationToken.with_timeout(args.timeout))
    except (PerplexityError, CancelledError) as e:
        err.write(f"\nError calling chat completion: {e}\n")
        return EXIT_ERROR

    # Streamed replies were already printed by the callback
    if response is None:
        out.write("\n")
        return EXIT_OK
    if response.choices:
        out.write(f"Assistant's reply:\n{response.text()}\n")
    else:
        out.write("No choices found in the response.\n")
    return EXIT_OK


__all__ = ["handle_ask", "build_request", "EXIT_OK", "EXIT_ERROR", "EXIT_NO_TOKEN"]
