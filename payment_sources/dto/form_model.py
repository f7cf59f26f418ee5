"""Pydantic base shared by the form-encodable DTOs.

Implements the :class:`~payment_sources.base.interfaces.FormEncodable`
contract generically: wire keys come from field aliases, enum members render
as their values, and ``None`` values or empty nested mappings are dropped.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict


def compact(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively drop ``None`` values and empty mappings."""
    out: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = compact(value)
            if not value:
                continue
        elif isinstance(value, Enum):
            value = value.value
        elif value is None:
            continue
        out[key] = value
    return out


class FormModel(BaseModel):
    """Base for request DTOs that encode to form key/value pairs."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    @classmethod
    def root_object_name(cls) -> Optional[str]:
        return None

    @classmethod
    def property_names_to_form_keys(cls) -> Mapping[str, str]:
        return {name: (info.alias or name) for name, info in cls.model_fields.items()}

    def to_form_dict(self) -> Dict[str, Any]:
        return compact(self.model_dump(by_alias=True))


__all__ = ["FormModel", "compact"]
