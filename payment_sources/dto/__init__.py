"""Request DTOs for source creation."""

from .enums import SourceType, SourceFlow, SourceUsage
from .address import AddressDetails
from .owner import OwnerDetails
from .redirect import RedirectDetails
from .card_params import CardParams
from .source_params import SourceParams

__all__ = [
    "SourceType",
    "SourceFlow",
    "SourceUsage",
    "AddressDetails",
    "OwnerDetails",
    "RedirectDetails",
    "CardParams",
    "SourceParams",
]
