"""Known model identifiers.

Any non-empty string is accepted wherever a model is expected; these members
are the identifiers the service documented when this client was written.
"""
from __future__ import annotations

from enum import Enum


class Model(str, Enum):
    """Models that can complete prompts."""

    LLAMA_31_SONAR_SMALL_128K_ONLINE = "llama-3.1-sonar-small-128k-online"
    LLAMA_31_SONAR_LARGE_128K_ONLINE = "llama-3.1-sonar-large-128k-online"
    LLAMA_31_SONAR_HUGE_128K_ONLINE = "llama-3.1-sonar-huge-128k-online"

    LLAMA_31_SONAR_SMALL_128K_CHAT = "llama-3.1-sonar-small-128k-chat"
    LLAMA_31_SONAR_LARGE_128K_CHAT = "llama-3.1-sonar-large-128k-chat"

    LLAMA_31_8B_INSTRUCT = "llama-3.1-8b-instruct"
    LLAMA_31_70B_INSTRUCT = "llama-3.1-70b-instruct"


__all__ = ["Model"]
