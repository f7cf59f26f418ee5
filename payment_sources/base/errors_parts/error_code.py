"""
Normalized error codes for the source parameter layer.

Values are lowercase snake_case and are considered a stable public contract
for logging. Business-rule failures (invalid IBAN, unsupported currency) are
never classified here; the remote service reports those.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated error codes raised at the encoding seam."""

    UNSUPPORTED_VALUE = "unsupported_value"
    INVALID_KEY = "invalid_key"
    NOT_ENCODABLE = "not_encodable"


__all__ = ["ErrorCode"]
