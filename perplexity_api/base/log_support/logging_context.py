"""Structured logging context carried by every client log event."""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Correlation fields for one client call.

    ``to_dict`` merges ``extra`` into the top level and prunes ``None``.
    """

    model: Optional[str] = None
    endpoint: Optional[str] = None
    streaming: Optional[bool] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
