"""Error raised when a value cannot be rendered into a form body."""
from __future__ import annotations

from .source_params_error import SourceParamsError


class EncodingError(SourceParamsError):
    """A parameter object or leaf value has no form representation.

    This is a programmer error at the transport seam (for example, an
    arbitrary object stored in ``metadata``), not a payment rule failure.
    """


__all__ = ["EncodingError"]
