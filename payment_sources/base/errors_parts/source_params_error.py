"""
Structured error type for the source parameter layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class SourceParamsError(Exception):
    """Represents a structured client-side error with a normalized code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        field: Wire key (bracketed form) where the failure was detected.
    """

    code: ErrorCode
    message: str
    field: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.field or '-'} {self.code.value}: {self.message}"


__all__ = ["SourceParamsError"]
