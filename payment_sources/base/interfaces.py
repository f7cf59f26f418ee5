"""
Structural interfaces (Protocols) for the payment_sources package.

Re-exports Protocols split into single-class modules under
``payment_sources.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import FormEncodable

__all__ = ["FormEncodable"]
