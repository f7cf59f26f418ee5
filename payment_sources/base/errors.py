"""Source parameter error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``payment_sources.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.source_params_error import SourceParamsError
from .errors_parts.encoding_error import EncodingError

__all__ = ["ErrorCode", "SourceParamsError", "EncodingError"]
