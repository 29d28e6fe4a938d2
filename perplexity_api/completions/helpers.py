"""Request-side helpers for the completions client.

Purpose:
    Validate and serialize a ``ChatCompletionRequest`` and assemble the
    headers and URL of the exchange, so ``client.py`` only orchestrates.

Notes:
    These helpers assume the consumer provides ``_token`` and ``_base_url``.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.constants import CHAT_COMPLETIONS_PATH, CLIENT_VERSION
from ..base.dto import build_payload
from ..base.models import ChatCompletionRequest
from ..base.validation import validate_request


class CompletionsRequestMixin:
    """Mixin offering payload, header and URL builders."""

    def _prepare_payload(self, request: ChatCompletionRequest) -> Dict[str, Any]:
        """Validate ``request`` and return its JSON-ready wire body.

        Raises:
            RequestValidationError: Before any network activity when a rule
                fails.
        """
        validate_request(request)
        return build_payload(request).to_wire()

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "User-Agent": f"perplexity-api-python/{CLIENT_VERSION}",
        }

    def _build_url(self) -> str:
        return self._base_url + CHAT_COMPLETIONS_PATH


__all__ = ["CompletionsRequestMixin"]
