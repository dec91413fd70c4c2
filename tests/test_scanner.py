"""
Tests for turning raw text into a Rut.

Covers the accepted layouts, length bounds, the early cut-off on long input,
and where the 'K' check character may appear.
"""

import logging

import pytest
from rutcheck.errors import (
    EmptyInputError,
    ErrorKind,
    InvalidFormatError,
    RutError,
    TooLongError,
    TooShortError,
)
from rutcheck.rut import Rut
from rutcheck.scanner import parse


class TestAcceptedLayouts:
    @pytest.mark.parametrize("text", ["12.345.678-5", "12345678-5", "123456785"])
    def test_all_layouts_give_same_rut(self, text):
        assert parse(text) == Rut(body=12345678, check="5")

    def test_lowercase_k_is_normalized(self):
        assert parse("1.009-k") == Rut(body=1009, check="K")

    def test_uppercase_k(self):
        rut = parse("1.009-K")
        assert rut.body == 1009
        assert rut.check == "K"

    def test_separators_anywhere_are_ignored(self):
        assert parse("-1.2-3.4-5.") == Rut(body=1234, check="5")

    def test_leading_zeros_in_body(self):
        assert parse("0001234-5").body == 1234

    def test_wrong_check_digit_still_parses(self):
        rut = parse("12.345.678-0")
        assert rut == Rut(body=12345678, check="0")
        assert not rut.is_valid()


class TestLengthBounds:
    def test_minimum_five_characters(self):
        assert parse("1234-5") == Rut(body=1234, check="5")

    def test_maximum_ten_characters(self):
        assert parse("123.456.789-K") == Rut(body=123456789, check="K")

    def test_too_short(self):
        with pytest.raises(TooShortError):
            parse("1-9")

    def test_only_separators_is_too_short(self):
        with pytest.raises(TooShortError):
            parse(".--.")

    def test_eleven_characters_too_long(self):
        with pytest.raises(TooLongError):
            parse("12345678901")

    def test_dotted_too_long(self):
        with pytest.raises(TooLongError):
            parse("12.345.678.901-2")

    def test_buffer_limit_stops_before_bad_character(self):
        # the 13th meaningful character trips the buffer limit first
        with pytest.raises(TooLongError):
            parse("1" * 12 + "x")

    def test_bad_character_before_buffer_limit(self):
        with pytest.raises(InvalidFormatError):
            parse("x" + "1" * 20)


class TestInvalidInput:
    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        with pytest.raises(EmptyInputError):
            parse(text)

    @pytest.mark.parametrize("text", ["abc-d", "12 345 678-5", "12,345,678-5", "12.345.678/5"])
    def test_invalid_characters(self, text):
        with pytest.raises(InvalidFormatError):
            parse(text)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidFormatError):
            parse("١٢٣٤٥")

    @pytest.mark.parametrize("text", ["12.34K.678-5", "K2345678-5", "1234567k-5", "kk.kkk-K"])
    def test_k_outside_check_position(self, text):
        with pytest.raises(InvalidFormatError):
            parse(text)


def test_error_kinds_are_exposed():
    cases = {
        "": ErrorKind.EMPTY_INPUT,
        "1-9": ErrorKind.TOO_SHORT,
        "12345678901": ErrorKind.TOO_LONG,
        "12.34K.678-5": ErrorKind.INVALID_FORMAT,
    }
    for text, kind in cases.items():
        with pytest.raises(RutError) as exc:
            parse(text)
        assert exc.value.kind is kind


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse("abc-d")


def test_rejection_log_truncates_long_input(caplog):
    caplog.set_level(logging.DEBUG, logger="rutcheck.scanner")
    raw = "x" + "1" * 500
    with pytest.raises(InvalidFormatError):
        parse(raw)
    assert caplog.records
    assert all(raw not in record.getMessage() for record in caplog.records)
    assert all(len(record.getMessage()) < 100 for record in caplog.records)
