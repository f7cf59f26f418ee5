"""Built-in defaults for the sources request layer.

Single source of truth for endpoint locations and request constants.
Override at runtime through environment variables or a config file (see
``payment_sources.config``).
"""
from __future__ import annotations

DEFAULT_API_BASE = "https://api.stripe.com/v1"
SOURCES_ENDPOINT = "sources"
DEFAULT_LOG_LEVEL = "INFO"

__all__ = [
    "DEFAULT_API_BASE",
    "SOURCES_ENDPOINT",
    "DEFAULT_LOG_LEVEL",
]
