"""Parameters used to create a Source object.

Purpose
-------
One flat, typed value object covers every payment method. Method-specific
fields live in ``details`` and are emitted under a top-level key equal to the
type's wire string (``bancontact[name]=...``). Named presets fill in the type,
flow, usage, currency and details each method requires.

External dependencies
---------------------
- Pydantic v2 for field typing; no I/O.

Failure modes
-------------
- Pure pass-through: values are not checked beyond their types (no IBAN or
  Luhn checks). The API rejects malformed values when the source is created.
- ``pydantic.ValidationError`` is raised for wrongly typed input, e.g. a
  non-integer amount.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator

from ..base.constants import EUR, SOURCE_FORM_KEYS
from ..base.logging import get_logger
from .address import AddressDetails
from .card_params import CardParams
from .enums import SourceFlow, SourceType, SourceUsage
from .form_model import FormModel, compact
from .owner import OwnerDetails
from .redirect import RedirectDetails

logger = get_logger(__name__)


class SourceParams(FormModel):
    """An object representing parameters used to create a Source.

    Attributes
    ----------
    type:
        Payment method of the source. Required.
    amount:
        Amount in the smallest currency unit (1099 for 10.99 EUR). Required
        by the API for ``single_use`` sources.
    currency:
        Currency the source will be chargeable in.
    flow:
        Authentication flow. Generally inferred by the API unless a type
        supports several flows; ``UNKNOWN`` means "let the API decide".
    metadata:
        Free-form string key/value pairs attached to the source.
    owner:
        Owner of the payment instrument.
    redirect:
        Redirect parameters, required when ``flow`` is ``redirect``.
    token:
        A previously issued token; its properties override these params.
    usage:
        ``reusable`` or ``single_use``; ``UNKNOWN`` leaves it to the API.
    details:
        Method-specific fields, sent under the type's own key.
    additional_api_parameters:
        Extra top-level parameters merged in last, for API fields this model
        does not name yet.
    """

    type: SourceType
    amount: Optional[int] = Field(default=None, ge=0)
    currency: Optional[str] = None
    flow: SourceFlow = SourceFlow.UNKNOWN
    metadata: Optional[Dict[str, str]] = None
    owner: Optional[OwnerDetails] = None
    redirect: Optional[RedirectDetails] = None
    token: Optional[str] = None
    usage: SourceUsage = SourceUsage.UNKNOWN
    details: Dict[str, Any] = Field(default_factory=dict)
    additional_api_parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> SourceType:
        return SourceType.from_string(value)

    @field_validator("flow", mode="before")
    @classmethod
    def _parse_flow(cls, value: Any) -> SourceFlow:
        return SourceFlow.from_string(value)

    @field_validator("usage", mode="before")
    @classmethod
    def _parse_usage(cls, value: Any) -> SourceUsage:
        return SourceUsage.from_string(value)

    # ------------------------------------------------------------------
    # FormEncodable
    # ------------------------------------------------------------------
    @classmethod
    def property_names_to_form_keys(cls) -> Mapping[str, str]:
        return {key: key for key in SOURCE_FORM_KEYS}

    def to_form_dict(self) -> Dict[str, Any]:
        """Return the wire mapping; keys without a value are omitted.

        ``UNKNOWN`` type, flow and usage count as absent.
        ``additional_api_parameters`` entries are merged last and may override
        named fields; ``None`` entries are skipped rather than clearing them.
        """
        data: Dict[str, Any] = {
            "type": self.type if self.type.is_known else None,
            "amount": self.amount,
            "currency": self.currency,
            "flow": self.flow if self.flow.is_known else None,
            "metadata": self.metadata,
            "owner": self.owner.to_form_dict() if self.owner else None,
            "redirect": self.redirect.to_form_dict() if self.redirect else None,
            "token": self.token,
            "usage": self.usage if self.usage.is_known else None,
        }
        if self.type.is_known:
            data[self.type.value] = self.details
        data.update({k: v for k, v in self.additional_api_parameters.items() if v is not None})
        return compact(data)

    def copy(self) -> "SourceParams":  # type: ignore[override]
        """Return an independent deep copy for deriving variant requests."""
        return self.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------
    @classmethod
    def _single_use_redirect(
        cls,
        source_type: SourceType,
        amount: int,
        return_url: str,
        details: Dict[str, Any],
        currency: str = EUR,
    ) -> "SourceParams":
        params = cls(
            type=source_type,
            amount=amount,
            currency=currency,
            flow=SourceFlow.REDIRECT,
            usage=SourceUsage.SINGLE_USE,
            redirect=RedirectDetails(return_url=return_url),
            details=compact(details),
        )
        logger.debug("built %s source params", source_type.value)
        return params

    @classmethod
    def bancontact(
        cls,
        amount: int,
        name: str,
        return_url: str,
        statement_descriptor: Optional[str] = None,
    ) -> "SourceParams":
        """Params for a Bancontact source (EUR, redirect, single use)."""
        return cls._single_use_redirect(
            SourceType.BANCONTACT,
            amount,
            return_url,
            {"name": name, "statement_descriptor": statement_descriptor},
        )

    @classmethod
    def bitcoin(cls, amount: int, currency: str, email: str) -> "SourceParams":
        """Params for a Bitcoin source paid to a receiver address."""
        return cls(
            type=SourceType.BITCOIN,
            amount=amount,
            currency=currency,
            flow=SourceFlow.RECEIVER,
            usage=SourceUsage.SINGLE_USE,
            details={"email": email},
        )

    @classmethod
    def card(cls, card: CardParams) -> "SourceParams":
        """Params for a card source built from raw card details.

        Number, expiry, CVC, cardholder name and flat billing address fields
        all go under ``card``; the card's own ``currency`` is not part of a
        source request.
        """
        details = card.to_form_dict()
        details.pop("currency", None)
        return cls(type=SourceType.CARD, details=details)

    @classmethod
    def giropay(
        cls,
        amount: int,
        name: str,
        return_url: str,
        statement_descriptor: Optional[str] = None,
    ) -> "SourceParams":
        """Params for a Giropay source (EUR, redirect, single use)."""
        return cls._single_use_redirect(
            SourceType.GIROPAY,
            amount,
            return_url,
            {"name": name, "statement_descriptor": statement_descriptor},
        )

    @classmethod
    def ideal(
        cls,
        amount: int,
        name: str,
        return_url: str,
        statement_descriptor: Optional[str] = None,
        bank: Optional[str] = None,
    ) -> "SourceParams":
        """Params for an iDEAL source; ``bank`` preselects the customer's bank."""
        return cls._single_use_redirect(
            SourceType.IDEAL,
            amount,
            return_url,
            {"name": name, "statement_descriptor": statement_descriptor, "bank": bank},
        )

    @classmethod
    def sepa_debit(
        cls,
        name: str,
        iban: str,
        address_line1: Optional[str],
        city: str,
        postal_code: str,
        country: str,
    ) -> "SourceParams":
        """Params for a reusable SEPA Direct Debit source.

        The account holder's address is sent as ``owner[address]``.
        """
        return cls(
            type=SourceType.SEPA_DEBIT,
            currency=EUR,
            usage=SourceUsage.REUSABLE,
            owner=OwnerDetails(
                address=AddressDetails(
                    line1=address_line1,
                    city=city,
                    postal_code=postal_code,
                    country=country,
                )
            ),
            details={"name": name, "iban": iban},
        )

    @classmethod
    def sofort(
        cls,
        amount: int,
        return_url: str,
        country: str,
        statement_descriptor: Optional[str] = None,
    ) -> "SourceParams":
        """Params for a Sofort source; ``country`` is the customer's bank country."""
        return cls._single_use_redirect(
            SourceType.SOFORT,
            amount,
            return_url,
            {"country": country, "statement_descriptor": statement_descriptor},
        )

    @classmethod
    def three_d_secure(
        cls,
        amount: int,
        currency: str,
        return_url: str,
        card: str,
    ) -> "SourceParams":
        """Params for a 3D Secure source wrapping an existing card source id."""
        return cls._single_use_redirect(
            SourceType.THREE_D_SECURE,
            amount,
            return_url,
            {"card": card},
            currency=currency,
        )


__all__ = ["SourceParams"]
