"""Layered configuration for the client.

Merge order (later wins)
------------------------
1. Built-in defaults (``defaults.py``)
2. Optional config file named by ``PERPLEXITY_CONFIG_FILE``: JSON, or YAML
   when the text is not valid JSON. Settings live under a ``perplexity``
   section, or at the top level when no such section exists::

       perplexity:
         base_url: https://api.perplexity.ai
         model: llama-3.1-sonar-large-128k-online
         api_token: ${PERPLEXITY_API_TOKEN}

3. Environment variables (``PERPLEXITY_BASE_URL``, ``PERPLEXITY_MODEL``,
   ``PERPLEXITY_SYSTEM_MESSAGE``, ``PERPLEXITY_API_TOKEN`` or its alias
   ``PERPLEXITY_API_KEY``)
4. Explicit overrides passed to :func:`get_client_config`

A ``.env`` file (path from ``DOTENV_FILE``, default ``./.env``) is read once
before the environment is consulted; it only fills variables that are unset
or hold placeholders.

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_SYSTEM_MESSAGE
from .env import ENV_FIELD_MAP, is_placeholder, resolve_token

CONFIG_SECTION = "perplexity"

DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "model": DEFAULT_MODEL,
    "system_message": DEFAULT_SYSTEM_MESSAGE,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Read ``KEY=VALUE`` lines from the dotenv file into ``os.environ``.

    Comments and blank lines are ignored; surrounding quotes are stripped.
    Existing variables are only replaced when they hold placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for raw in fh:
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and (key not in os.environ or is_placeholder(os.environ.get(key))):
                os.environ[key] = value


def _parse_config_text(text: str) -> Dict[str, Any]:
    """Parse JSON first, then YAML; non-mapping documents yield ``{}``."""
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    """Return the ``perplexity`` section of the config file (cached per path)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv("PERPLEXITY_CONFIG_FILE")
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Dict[str, Any] = {}
    if path and Path(path).is_file():
        data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
        section = data.get(CONFIG_SECTION)
        if isinstance(section, dict):
            data = section
    _FILE_CACHE, _FILE_CACHE_PATH = data, path
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, name in ENV_FIELD_MAP.items():
        val = os.getenv(name)
        if val:
            out[field] = val
    token, _ = resolve_token()
    if token:
        out["api_token"] = token
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Keys: ``base_url``, ``model``, ``system_message`` and, when any source
    provides one, ``api_token``. ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    file_cfg = _load_external_config()
    if "api_key" in file_cfg and "api_token" not in file_cfg:
        file_cfg = {**file_cfg, "api_token": file_cfg["api_key"]}
    cfg |= {k: v for k, v in file_cfg.items() if v is not None and k != "api_key"}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (used by tests)."""
    global _FILE_CACHE, _FILE_CACHE_PATH, _DOTENV_LOADED
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None
    _DOTENV_LOADED = False


__all__ = ["get_client_config", "reset_config_cache", "DEFAULTS", "CONFIG_SECTION"]
