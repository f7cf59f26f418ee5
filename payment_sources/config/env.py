"""payment_sources.config.env
==========================

Environment variable names recognized by the configuration layer, with
small lookup helpers.

Conventions
-----------
``PAYMENT_SOURCES_<FIELD>`` for every configurable field, e.g.
``PAYMENT_SOURCES_API_BASE``. ``PAYMENT_SOURCES_CONFIG_FILE`` points at an
optional JSON file.

Failure modes
-------------
Helpers never raise on unset variables; they return ``None`` or an empty
mapping and let callers fall back to defaults.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_PREFIX = "PAYMENT_SOURCES_"
CONFIG_FILE_ENV = "PAYMENT_SOURCES_CONFIG_FILE"

# config field -> env var suffix
ENV_FIELD_MAP: Dict[str, str] = {
    "api_base": "API_BASE",
    "sources_endpoint": "SOURCES_ENDPOINT",
    "log_level": "LOG_LEVEL",
}


def get_env_var_name(field: str) -> Optional[str]:
    """Return the environment variable name for a config field, if known."""
    suffix = ENV_FIELD_MAP.get(field)
    return f"{ENV_PREFIX}{suffix}" if suffix else None


def env_overrides() -> Dict[str, str]:
    """Collect non-empty config values set in the environment."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        name = get_env_var_name(field)
        val = os.environ.get(name) if name else None
        if val and val.strip():
            out[field] = val.strip()
    return out


__all__ = [
    "ENV_PREFIX",
    "CONFIG_FILE_ENV",
    "ENV_FIELD_MAP",
    "get_env_var_name",
    "env_overrides",
]
