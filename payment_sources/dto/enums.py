"""Wire enumerations for source type, authentication flow and usage.

Each enum value is the exact string the API sends and accepts. Parsing is
lenient: unrecognized strings map to ``UNKNOWN`` rather than raising, so a
newer API value never breaks an older client.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class _WireEnum(str, Enum):
    @classmethod
    def from_string(cls, value: Any) -> "_WireEnum":
        """Parse a wire string case-insensitively, falling back to ``UNKNOWN``."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        key = _ALIASES.get(cls.__name__, {}).get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return cls("unknown")

    @property
    def is_known(self) -> bool:
        return self.value != "unknown"


class SourceType(_WireEnum):
    """Payment method a source is created for."""

    BANCONTACT = "bancontact"
    BITCOIN = "bitcoin"
    CARD = "card"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    THREE_D_SECURE = "three_d_secure"
    UNKNOWN = "unknown"


class SourceFlow(_WireEnum):
    """Authentication flow the customer completes before the source is chargeable."""

    REDIRECT = "redirect"
    RECEIVER = "receiver"
    CODE_VERIFICATION = "code_verification"
    NONE = "none"
    UNKNOWN = "unknown"


class SourceUsage(_WireEnum):
    """Whether a source can be charged more than once."""

    REUSABLE = "reusable"
    SINGLE_USE = "single_use"
    UNKNOWN = "unknown"


_ALIASES = {
    "SourceFlow": {"verification": "code_verification"},
    "SourceUsage": {"single-use": "single_use"},
}


__all__ = ["SourceType", "SourceFlow", "SourceUsage"]
