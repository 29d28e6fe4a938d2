"""Structured logging utilities for the client.

One shared ``perplexity`` logger owns a stderr handler (JSON by default);
module loggers obtained through :func:`get_logger` are its children and
propagate to it, so every line is emitted exactly once. The level comes from
``PERPLEXITY_LOG_LEVEL`` (default ``WARNING``, so a library import stays
quiet) and can be changed at runtime with :func:`configure_logger`.

Events are emitted through :func:`log_event`, or :func:`normalized_log_event`
which guarantees the canonical keys ``phase``, ``emitted``, ``tokens`` and,
on failure, ``error_code``.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "perplexity"
LEVEL_ENV = "PERPLEXITY_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_CONSOLE_HANDLER_ATTR = "_perplexity_console_handler"
_FILE_HANDLER_ATTR = "_perplexity_file_handler"
_CONFIGURED_ATTR = "_perplexity_configured"


def _parse_level(value: str | None, default: int) -> int:
    """Parse a level name (case-insensitive); unknown names give ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired = _parse_level(os.getenv(LEVEL_ENV), default=level)
    if getattr(logger, _CONFIGURED_ATTR, False):
        if os.getenv(LEVEL_ENV):
            logger.setLevel(desired)
        desired = logger.level
        for handler in list(logger.handlers):
            if not getattr(handler, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream = getattr(handler, "stream", None)
            if stream is None or getattr(stream, "closed", False):
                # pytest capture swaps and closes sys.stderr between tests
                logger.removeHandler(handler)
                logger.addHandler(_console_handler(json_mode, desired))
            else:
                if stream is not sys.stderr:
                    handler.setStream(sys.stderr)
                handler.setLevel(desired)
        return logger

    logger.setLevel(desired)
    logger.handlers[:] = [_console_handler(json_mode, desired)]
    logger.propagate = False
    setattr(logger, _CONFIGURED_ATTR, True)
    return logger


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    """Return the base logger or a child of it.

    Child names should live under ``perplexity.`` (e.g.
    ``perplexity.completions``) so that they propagate to the shared handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        New level (number or name). ``None`` keeps the current level.
    file_path:
        When given, attach (or re-point) a rotating file handler writing to
        this path. When ``None``, remove any file handler this module added.
    json_mode:
        Formatter for the file handler.

    Returns
    -------
    logging.Logger
        The shared base logger.

    Handlers attached by the application are never touched.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.WARNING)

    if level is not None:
        new_level = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(new_level)
        for h in logger.handlers:
            h.setLevel(new_level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    existing = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        # 10MB x 5 backups
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_make_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured event as a single-line JSON message.

    ``None``-valued fields are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "emitted", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    """Turn usage information into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    if hasattr(tokens, "model_dump"):
        return tokens.model_dump()
    with contextlib.suppress(TypeError, ValueError):
        return dict(tokens)
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    emitted: bool | None = None,
    tokens: Any = None,
    error_code: str | None = None,
    level: int | None = None,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the canonical keys.

    ``phase``, ``emitted`` and ``tokens`` are always present (``null`` when
    unknown); ``error_code`` only when set. Events with an error code log at
    ``WARNING`` unless ``level`` says otherwise.
    """
    fields: Dict[str, Any] = {
        "phase": phase,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is not None and k not in fields:
            fields[k] = v
    if level is None:
        level = logging.WARNING if error_code is not None else logging.INFO
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
]
