"""Tests for payment_sources.base.encoding.

Covers bracket flattening, scalar rendering, root object nesting and the
error raised for values with no form representation.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import parse_qsl

import pytest

from payment_sources.base.encoding import encode_form, flatten_form, form_pairs
from payment_sources.base.errors import EncodingError, ErrorCode
from payment_sources.dto import CardParams, SourceParams, SourceType


def test_flatten_nested_mappings_and_lists():
    pairs = flatten_form(
        {
            "owner": {"address": {"city": "Berlin"}, "name": "Jane"},
            "expand": ["customer", "card"],
        }
    )
    assert pairs == [
        ("owner[address][city]", "Berlin"),
        ("owner[name]", "Jane"),
        ("expand[0]", "customer"),
        ("expand[1]", "card"),
    ]  # nosec B101 - test assertion


def test_flatten_renders_scalars():
    pairs = dict(
        flatten_form(
            {"flag": True, "off": False, "n": 7, "ratio": 0.5, "price": Decimal("1.10"), "t": SourceType.IDEAL}
        )
    )
    assert pairs == {"flag": "true", "off": "false", "n": "7", "ratio": "0.5", "price": "1.10", "t": "ideal"}


def test_flatten_skips_none_and_empty_containers():
    assert flatten_form({"a": None, "b": {}, "c": [], "d": "x"}) == [("d", "x")]


def test_unsupported_leaf_raises_encoding_error():
    with pytest.raises(EncodingError) as excinfo:
        flatten_form({"metadata": {"when": object()}})
    assert excinfo.value.code is ErrorCode.UNSUPPORTED_VALUE
    assert excinfo.value.field == "metadata[when]"


def test_non_string_key_raises():
    with pytest.raises(EncodingError) as excinfo:
        flatten_form({"metadata": {(1, 2): "x"}})
    assert excinfo.value.code is ErrorCode.INVALID_KEY


def test_top_level_scalar_is_not_encodable():
    with pytest.raises(EncodingError) as excinfo:
        flatten_form("type=card")
    assert excinfo.value.code is ErrorCode.NOT_ENCODABLE


def test_form_pairs_nests_under_root_object_name():
    card = CardParams(number="4242424242424242", exp_month=1, exp_year=30, currency="eur")
    assert form_pairs(card) == [
        ("card[number]", "4242424242424242"),
        ("card[exp_month]", "1"),
        ("card[exp_year]", "30"),
        ("card[currency]", "eur"),
    ]


def test_form_pairs_rejects_arbitrary_objects():
    with pytest.raises(EncodingError):
        form_pairs(object())


def test_encode_form_round_trips_through_parse_qsl(return_url):
    params = SourceParams.ideal(1099, "Jane Doe", return_url, bank="ing")
    params.metadata = {"order id": "A&B"}
    body = encode_form(params)
    assert "metadata%5Border+id%5D=A%26B" in body
    decoded = dict(parse_qsl(body))
    assert decoded["ideal[bank]"] == "ing"
    assert decoded["metadata[order id]"] == "A&B"
    assert decoded["redirect[return_url]"] == return_url


def test_encode_form_accepts_plain_mapping():
    assert encode_form({"type": "card", "token": "tok_1"}) == "type=card&token=tok_1"


def test_nested_form_encodable_values_are_expanded():
    pairs = flatten_form({"source": SourceParams(type="card", token="tok_1")})
    assert pairs == [("source[type]", "card"), ("source[token]", "tok_1")]
