"""Pytest configuration for the payment_sources test suite.

Clears ``PAYMENT_SOURCES_*`` environment variables for every test so local
shell settings never leak into configuration or logging assertions.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator

import pytest

from payment_sources.base.logging import BASE_LOGGER_NAME, get_logger
from payment_sources.dto import CardParams


@pytest.fixture(autouse=True)
def clean_payment_sources_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove package env overrides for the duration of a test."""

    for name in list(os.environ):
        if name.startswith("PAYMENT_SOURCES_"):
            monkeypatch.delenv(name, raising=False)
    # drop any level pinned by configure_logger in an earlier test
    monkeypatch.setattr(
        logging.getLogger(BASE_LOGGER_NAME), "_payment_sources_level_pinned", False, raising=False
    )
    # rebind the console handler to the stderr of the running test
    get_logger()
    yield


@pytest.fixture()
def return_url() -> str:
    return "https://example.com/return"


@pytest.fixture()
def card_params() -> CardParams:
    """A fully populated test card."""

    return CardParams(
        number="4242424242424242",
        exp_month=12,
        exp_year=2030,
        cvc="123",
        name="Jane Doe",
        address_line1="Unter den Linden 1",
        address_city="Berlin",
        address_zip="10117",
        address_country="DE",
        currency="eur",
    )
