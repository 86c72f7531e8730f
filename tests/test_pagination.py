"""Tests for skip/limit coercion."""

from __future__ import annotations

from mongo_query_parser import cast_limit, cast_skip


def test_parse_skip_limit() -> None:
    assert cast_skip("20") == 20
    assert cast_limit("10") == 10


def test_numeric_values_pass_through() -> None:
    assert cast_limit(10) == 10
    assert cast_skip(2.5) == 2.5


def test_zero_padded_is_still_numeric() -> None:
    assert cast_skip("010") == 10


def test_non_numeric_is_none() -> None:
    assert cast_limit("ten") is None
    assert cast_skip("1,2") is None
