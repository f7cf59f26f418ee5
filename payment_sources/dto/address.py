"""Postal address details attached to a source owner."""

from __future__ import annotations

from typing import Optional

from .form_model import FormModel


class AddressDetails(FormModel):
    """Owner address. Every field is optional and passed through unchanged.

    Country is a two-letter code by API convention; it is not checked here.
    """

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


__all__ = ["AddressDetails"]
