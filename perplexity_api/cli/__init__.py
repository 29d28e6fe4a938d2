"""Command line example for the client.

Usage::

    PERPLEXITY_API_TOKEN=... python -m perplexity_api.cli "Recommend a book"
"""

from __future__ import annotations

from typing import Optional

from .cli_actions import handle_ask
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = build_parser().parse_args(argv)
    return handle_ask(args)


__all__ = ["main"]
