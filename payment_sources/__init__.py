"""payment_sources package

Typed parameter objects for creating payment Sources (card, bank redirect
methods, bitcoin, 3D Secure, SEPA Direct Debit) and the form encoding that
turns them into request bodies.

Public API (re-exported):
    - Version: ``__version__``
    - Params: :class:`SourceParams`, :class:`CardParams` and the nested
      detail models
    - Enums: :class:`SourceType`, :class:`SourceFlow`, :class:`SourceUsage`
    - Encoding: :class:`FormEncodable`, :func:`encode_form`, :func:`flatten_form`
    - Request envelope: :func:`build_create_source_request`
    - Errors: :class:`SourceParamsError`, :class:`EncodingError`, :class:`ErrorCode`

Sending requests, authentication and parsing the resulting Source are left
to the caller's transport.
"""

from .base.errors import EncodingError, ErrorCode, SourceParamsError
from .base.encoding import encode_form, flatten_form, form_pairs
from .base.interfaces import FormEncodable
from .dto import (
    AddressDetails,
    CardParams,
    OwnerDetails,
    RedirectDetails,
    SourceFlow,
    SourceParams,
    SourceType,
    SourceUsage,
)
from .service import SourceRequest, build_create_source_request

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SourceParams",
    "CardParams",
    "AddressDetails",
    "OwnerDetails",
    "RedirectDetails",
    "SourceType",
    "SourceFlow",
    "SourceUsage",
    "FormEncodable",
    "encode_form",
    "flatten_form",
    "form_pairs",
    "SourceRequest",
    "build_create_source_request",
    "SourceParamsError",
    "EncodingError",
    "ErrorCode",
]
