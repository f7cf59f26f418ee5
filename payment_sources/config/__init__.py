"""Configuration layer for the sources request builder.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional JSON file pointed to by ``PAYMENT_SOURCES_CONFIG_FILE``
    3. Environment variables (``PAYMENT_SOURCES_API_BASE`` ...)
    4. In-code overrides passed to :func:`get_sources_config`

Example file::

    {"api_base": "https://payments.internal.example/v1", "log_level": "DEBUG"}

Public API
----------
* get_sources_config(overrides: dict | None = None) -> dict
* get_api_base() -> str
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import DEFAULT_API_BASE, DEFAULT_LOG_LEVEL, SOURCES_ENDPOINT
from .env import CONFIG_FILE_ENV, ENV_FIELD_MAP, env_overrides

DEFAULTS: Dict[str, Any] = {
    "api_base": DEFAULT_API_BASE,
    "sources_endpoint": SOURCES_ENDPOINT,
    "log_level": DEFAULT_LOG_LEVEL,
}


def _load_external_config() -> Dict[str, Any]:
    """Read the optional JSON config file; unreadable or non-object files yield ``{}``."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if k in ENV_FIELD_MAP}


def get_sources_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping."""
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_api_base() -> str:
    return str(get_sources_config()["api_base"])


__all__ = [
    "DEFAULTS",
    "get_sources_config",
    "get_api_base",
]
