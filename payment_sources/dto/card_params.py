"""Card details collected from the customer.

Used directly as a card token request body (nested under ``card``) and as
the input to :meth:`SourceParams.card`. No Luhn or expiry checks are made;
the API rejects malformed cards.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .form_model import FormModel


class CardParams(FormModel):
    """Raw card number, expiry, CVC and billing details.

    Attributes:
        number: Card number as entered (spaces are not stripped).
        exp_month: Expiry month, 1-12 by convention.
        exp_year: Two- or four-digit expiry year.
        cvc: Card security code.
        name: Cardholder name.
        address_*: Flat billing address fields in the card wire shape.
        currency: Optional currency for debit cards used in payouts.
    """

    number: Optional[str] = None
    exp_month: Optional[int] = Field(default=None, ge=0)
    exp_year: Optional[int] = Field(default=None, ge=0)
    cvc: Optional[str] = None
    name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    currency: Optional[str] = None

    @classmethod
    def root_object_name(cls) -> Optional[str]:
        return "card"


__all__ = ["CardParams"]
