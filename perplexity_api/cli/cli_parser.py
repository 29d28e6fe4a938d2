"""CLI parser construction for ``perplexity-cli``.

Wires argument shapes only; execution lives in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..base.models import Model, RecencyFilter


def _str2bool(v: str | None) -> bool:
    """Permissive conversion of common truthy/falsey strings to bool.

    ``None`` (flag given without a value) means ``True``.
    """
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream [BOOL]`` / ``--no-stream`` (streaming is the default)."""
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=True)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI parser. No side effects."""
    p = argparse.ArgumentParser(
        prog="perplexity-cli",
        description="Ask the Perplexity chat completions API a question.",
    )
    p.add_argument("prompt", help="User message to send")
    p.add_argument(
        "--model",
        default=None,
        help=f"Model identifier (default from config, e.g. {Model.LLAMA_31_SONAR_SMALL_128K_ONLINE.value})",
    )
    p.add_argument("--system", default=None, help="System message (default from config)")
    p.add_argument("--recency", choices=[f.value for f in RecencyFilter], default=None)
    p.add_argument("--max-tokens", type=int, default=None)
    p.add_argument("--temperature", type=float, default=None)
    p.add_argument("--timeout", type=float, default=300.0, help="Overall deadline in seconds")
    p.add_argument("--base-url", default=None)
    add_stream_flags(p)
    p.add_argument("--log-level", default=None, help="Client log level (e.g. INFO, DEBUG)")
    return p


__all__ = ["build_parser", "add_stream_flags"]
