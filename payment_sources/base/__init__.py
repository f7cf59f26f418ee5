"""Shared building blocks for the payment_sources package."""
