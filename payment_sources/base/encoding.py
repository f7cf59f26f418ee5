"""Form encoding for request-parameter objects.

Purpose
-------
Turn any :class:`FormEncodable` (or a plain mapping) into the bracketed
key/value pairs expected by the payments API and into an
``application/x-www-form-urlencoded`` body::

    owner[address][city]=Berlin
    metadata[order_id]=42
    expand[0]=customer

Failure modes
-------------
Leaves that have no form representation raise :class:`EncodingError`. ``None``
leaves and empty containers are skipped, so an object never sends null
placeholders over the wire.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .errors import EncodingError, ErrorCode
from .interfaces import FormEncodable

FormPairs = List[Tuple[str, str]]


def _nested_key(prefix: Optional[str], key: Any) -> str:
    if not isinstance(key, (str, int)):
        raise EncodingError(
            code=ErrorCode.INVALID_KEY,
            message=f"form keys must be str or int, got {type(key).__name__}",
            field=prefix,
        )
    return f"{prefix}[{key}]" if prefix else str(key)


def _render_leaf(value: Any, key: str) -> str:
    """Render a scalar the way the API parses it."""
    if isinstance(value, Enum):
        value = value.value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise EncodingError(
        code=ErrorCode.UNSUPPORTED_VALUE,
        message=f"cannot form-encode value of type {type(value).__name__}",
        field=key,
    )


def flatten_form(data: Any, prefix: Optional[str] = None) -> FormPairs:
    """Flatten nested mappings/sequences into bracketed ``(key, value)`` pairs.

    Parameters
    ----------
    data:
        A mapping, sequence, nested :class:`FormEncodable` or scalar leaf.
    prefix:
        Bracketed key accumulated so far; ``None`` at the top level.

    Returns
    -------
    list[tuple[str, str]]
        Pairs in insertion order, ready for ``urlencode``.
    """
    if data is None:
        return []
    if isinstance(data, FormEncodable) and not isinstance(data, type):
        data = data.to_form_dict()
    if isinstance(data, Mapping):
        pairs: FormPairs = []
        for key, value in data.items():
            pairs.extend(flatten_form(value, _nested_key(prefix, key)))
        return pairs
    if isinstance(data, (list, tuple)):
        pairs = []
        for index, value in enumerate(data):
            pairs.extend(flatten_form(value, _nested_key(prefix, index)))
        return pairs
    if prefix is None:
        raise EncodingError(
            code=ErrorCode.NOT_ENCODABLE,
            message=f"top-level value of type {type(data).__name__} has no keys",
        )
    return [(prefix, _render_leaf(data, prefix))]


def form_pairs(obj: Any) -> FormPairs:
    """Return the bracketed pairs for a parameter object or mapping.

    When the object declares a ``root_object_name`` its mapping is nested
    under that key (``card[number]=...``).
    """
    if isinstance(obj, FormEncodable) and not isinstance(obj, type):
        data: Mapping[str, Any] = obj.to_form_dict()
        root = obj.root_object_name()
        if root:
            data = {root: data}
        return flatten_form(data)
    if isinstance(obj, Mapping):
        return flatten_form(obj)
    raise EncodingError(
        code=ErrorCode.NOT_ENCODABLE,
        message=f"{type(obj).__name__} does not implement FormEncodable",
    )


def encode_form(obj: Any) -> str:
    """Encode a parameter object or mapping as a urlencoded request body."""
    return urlencode(form_pairs(obj))


__all__ = ["FormPairs", "flatten_form", "form_pairs", "encode_form"]
