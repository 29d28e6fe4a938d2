"""Built-in configuration defaults."""
from __future__ import annotations

from ..base.constants import DEFAULT_BASE_URL
from ..base.models import Model

DEFAULT_MODEL = Model.LLAMA_31_SONAR_SMALL_128K_ONLINE.value
DEFAULT_SYSTEM_MESSAGE = "Be precise and concise."

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_MODEL", "DEFAULT_SYSTEM_MESSAGE"]
