"""Base shared constants for source parameter encoding.

Central location to avoid scattering magic strings across the DTO and
encoding layers.
"""
from __future__ import annotations

# Currency fixed by the EUR-only redirect payment methods
EUR = "EUR"

# Form body content type used by the sources endpoint
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Top-level wire keys in the order they are emitted
SOURCE_FORM_KEYS = (
    "type",
    "amount",
    "currency",
    "flow",
    "metadata",
    "owner",
    "redirect",
    "token",
    "usage",
)

__all__ = [
    "EUR",
    "FORM_CONTENT_TYPE",
    "SOURCE_FORM_KEYS",
]
