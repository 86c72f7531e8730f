"""Tests for ValueTyper and numeric coercion."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone

import pytest

from mongo_query_parser import InvalidCastError, ValueTyper, build_casters, to_number


class TestLiterals:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("false", False), ("null", None)],
    )
    def test_exact_literals(self, typer: ValueTyper, raw: str, expected: object) -> None:
        assert typer.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["True", "FALSE", "Null", "nil"])
    def test_literals_are_case_sensitive(self, typer: ValueTyper, raw: str) -> None:
        assert typer.parse(raw) == raw


class TestNumbers:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("10", 10),
            ("0", 0),
            ("-3", -3),
            ("-3.5", -3.5),
            ("0.25", 0.25),
            ("1e3", 1000),
        ],
    )
    def test_numeric_strings(self, typer: ValueTyper, raw: str, expected: float) -> None:
        value = typer.parse(raw)
        assert value == expected
        assert not isinstance(value, str)

    def test_integers_stay_int(self, typer: ValueTyper) -> None:
        assert isinstance(typer.parse("42"), int)

    @pytest.mark.parametrize("raw", ["007", "0123", "00.5"])
    def test_zero_padded_stays_string(self, typer: ValueTyper, raw: str) -> None:
        assert typer.parse(raw) == raw

    def test_empty_string_is_not_a_number(self, typer: ValueTyper) -> None:
        assert typer.parse("") == ""

    @pytest.mark.parametrize("raw", ["\u0661\u0662", "\uff11\uff12", "1\u0662.5"])
    def test_non_ascii_digits_stay_string(self, typer: ValueTyper, raw: str) -> None:
        assert typer.parse(raw) == raw


class TestToNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (" 12 ", 12),
            ("0x1F", 31),
            ("0b101", 5),
            ("+5", 5),
            (".5", 0.5),
            ("5.", 5.0),
        ],
    )
    def test_javascript_number_forms(self, raw: str, expected: float) -> None:
        assert to_number(raw) == expected

    def test_infinity(self) -> None:
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "1_000", "nan", "inf", "1,2"])
    def test_not_a_number(self, raw: str) -> None:
        assert to_number(raw) is None


class TestLists:
    def test_comma_list(self, typer: ValueTyper) -> None:
        assert typer.parse("a,b,c") == ["a", "b", "c"]

    def test_list_items_are_typed(self, typer: ValueTyper) -> None:
        assert typer.parse("1,true,x,null") == [1, True, "x", None]

    def test_list_keeps_duplicates_and_order(self, typer: ValueTyper) -> None:
        assert typer.parse("b,a,b") == ["b", "a", "b"]


class TestRegex:
    def test_case_insensitive_regex(self, typer: ValueTyper) -> None:
        value = typer.parse("/^bob/i")
        assert isinstance(value, re.Pattern)
        assert value.pattern == "^bob"
        assert value.flags & re.IGNORECASE

    def test_plain_regex(self, typer: ValueTyper) -> None:
        value = typer.parse(r"/foo_\d+/")
        assert isinstance(value, re.Pattern)
        assert not value.flags & re.IGNORECASE
        assert value.search("foo_12")

    def test_unsupported_flags_stay_string(self, typer: ValueTyper) -> None:
        assert typer.parse("/foo/g") == "/foo/g"

    def test_trailing_newline_is_not_a_regex(self, typer: ValueTyper) -> None:
        assert typer.parse("/a/\n") == "/a/\n"

    def test_broken_regex_raises(self, typer: ValueTyper) -> None:
        with pytest.raises(InvalidCastError) as exc_info:
            typer.parse("/(/")
        assert exc_info.value.raw == "/(/"


class TestDates:
    def test_iso_date(self, typer: ValueTyper) -> None:
        assert typer.parse("2020-01-15") == datetime(2020, 1, 15)

    def test_iso_datetime_with_offset(self, typer: ValueTyper) -> None:
        value = typer.parse("2020-01-15T10:30:00Z")
        assert value == datetime(2020, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_configured_format(self) -> None:
        typer = ValueTyper(build_casters(), date_formats=["%d/%m/%Y"])
        assert typer.parse("15/01/2020") == datetime(2020, 1, 15)

    def test_plain_words_are_not_dates(self, typer: ValueTyper) -> None:
        assert typer.parse("active") == "active"


class TestCasters:
    def test_string_caster(self, typer: ValueTyper) -> None:
        assert typer.parse("string(123)") == "123"
        assert typer.parse("string(true)") == "true"

    def test_caster_payload_keeps_commas(self, typer: ValueTyper) -> None:
        assert typer.parse("string(a,b)") == "a,b"

    def test_date_caster(self, typer: ValueTyper) -> None:
        assert typer.parse("date(2020-01-15)") == datetime(2020, 1, 15)

    def test_date_caster_failure(self, typer: ValueTyper) -> None:
        with pytest.raises(InvalidCastError) as exc_info:
            typer.parse("date(yesterday)")
        assert exc_info.value.raw == "yesterday"
        assert exc_info.value.caster == "date"
        assert "yesterday" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unknown_caster_name_is_plain_text(self, typer: ValueTyper) -> None:
        assert typer.parse("nope(1)") == "nope(1)"

    def test_trailing_newline_is_not_a_caster_call(self, typer: ValueTyper) -> None:
        assert typer.parse("string(x)\n") == "string(x)\n"

    def test_custom_caster(self) -> None:
        typer = ValueTyper(build_casters({"upper": str.upper}))
        assert typer.parse("upper(abc)") == "ABC"

    def test_custom_caster_error_is_wrapped(self) -> None:
        def explode(raw: str) -> None:
            raise RuntimeError("boom")

        typer = ValueTyper(build_casters({"explode": explode}))
        with pytest.raises(InvalidCastError) as exc_info:
            typer.parse("explode(x)")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_custom_caster_overrides_builtin(self) -> None:
        typer = ValueTyper(build_casters({"string": lambda raw: f"s:{raw}"}))
        assert typer.parse("string(1)") == "s:1"

    def test_field_caster(self) -> None:
        typer = ValueTyper(build_casters(), cast_params={"zip": "string"})
        assert typer.parse("01234", "zip") == "01234"
        assert typer.parse("12345", "zip") == "12345"
        assert typer.parse("12345", "other") == 12345

    def test_field_caster_applies_to_whole_list(self) -> None:
        typer = ValueTyper(build_casters(), cast_params={"code": "string"})
        assert typer.parse("1,2", "code") == "1,2"

    def test_field_caster_with_unknown_name_is_ignored(self) -> None:
        typer = ValueTyper(build_casters(), cast_params={"zip": "missing"})
        assert typer.parse("12345", "zip") == 12345
