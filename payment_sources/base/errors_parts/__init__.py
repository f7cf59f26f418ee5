"""Errors parts package public surface.

Prefer importing from `payment_sources.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .source_params_error import SourceParamsError
from .encoding_error import EncodingError

__all__ = ["ErrorCode", "SourceParamsError", "EncodingError"]
