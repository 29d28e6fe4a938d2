"""Environment variable names and credential lookup helpers.

``PERPLEXITY_API_TOKEN`` is the canonical credential variable;
``PERPLEXITY_API_KEY`` is accepted as an alias. Placeholder values left in
sample ``.env`` files (``changeme``, ``placeholder``...) are treated as unset.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

TOKEN_ENV_NAMES: Tuple[str, ...] = ("PERPLEXITY_API_TOKEN", "PERPLEXITY_API_KEY")

# config field -> environment variable
ENV_FIELD_MAP: Dict[str, str] = {
    "base_url": "PERPLEXITY_BASE_URL",
    "model": "PERPLEXITY_MODEL",
    "system_message": "PERPLEXITY_SYSTEM_MESSAGE",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder or test value.

    Matches values containing ``placeholder``, ``changeme`` or ``example``,
    or starting with ``test_`` (case-insensitive, surrounding spaces ignored).
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def resolve_token() -> Tuple[Optional[str], Optional[str]]:
    """Return ``(token, env_var_used)`` from the environment.

    Variables are checked in ``TOKEN_ENV_NAMES`` order; empty and placeholder
    values are skipped. Returns ``(None, None)`` when nothing usable is set.
    """
    for name in TOKEN_ENV_NAMES:
        val = os.getenv(name)
        if val and val.strip() and not is_placeholder(val):
            return val.strip(), name
    return None, None


__all__ = ["TOKEN_ENV_NAMES", "ENV_FIELD_MAP", "is_placeholder", "resolve_token"]
