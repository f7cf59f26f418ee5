"""FormEncodable Protocol (single-class module).

The contract every request-parameter object implements so one transport
routine can turn any of them into a form body.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class FormEncodable(Protocol):
    """Structural interface for objects that render to form key/value pairs.

    ``to_form_dict`` returns only keys that hold a value; nested mappings are
    allowed and are flattened into bracket notation by the encoder.
    """

    @classmethod
    def root_object_name(cls) -> Optional[str]:
        """Key the encoded mapping nests under, or ``None`` for top level."""
        ...

    @classmethod
    def property_names_to_form_keys(cls) -> Mapping[str, str]:
        """Map attribute names to their wire keys."""
        ...

    def to_form_dict(self) -> Dict[str, Any]:
        """Return the wire mapping with absent fields omitted."""
        ...
