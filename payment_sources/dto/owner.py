"""Owner of the payment instrument behind a source."""

from __future__ import annotations

from typing import Optional

from .address import AddressDetails
from .form_model import FormModel


class OwnerDetails(FormModel):
    """Information about the owner; used or required by some source types."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[AddressDetails] = None


__all__ = ["OwnerDetails"]
