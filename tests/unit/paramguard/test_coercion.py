"""Tests for paramguard.coercion."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from paramguard import CoercionError, FieldType, coerce


class TestIntegerCoercion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("5", 5), (" 42 ", 42), ("-3", -3), ("+7", 7), (9, 9), (3.0, 3)],
    )
    def test_accepts(self, raw, expected):
        assert coerce(raw, FieldType.INTEGER) == expected

    @pytest.mark.parametrize("raw", ["abc", "4.5", "1e3", True, False, 2.5, float("nan"), [1], None])
    def test_rejects(self, raw):
        with pytest.raises(CoercionError):
            coerce(raw, FieldType.INTEGER)

    def test_rejects_digit_string_past_int_limit(self):
        with pytest.raises(CoercionError):
            coerce("9" * 5000, FieldType.INTEGER)


class TestFloatCoercion:
    @pytest.mark.parametrize(("raw", "expected"), [("1.5", 1.5), ("2", 2.0), (3, 3.0), (0.25, 0.25)])
    def test_accepts(self, raw, expected):
        assert coerce(raw, FieldType.FLOAT) == expected

    @pytest.mark.parametrize("raw", ["one", "nan", "inf", True, {}])
    def test_rejects(self, raw):
        with pytest.raises(CoercionError):
            coerce(raw, FieldType.FLOAT)


class TestBooleanCoercion:
    @pytest.mark.parametrize("raw", [True, 1, "true", "TRUE", "1", "yes", "on"])
    def test_truthy(self, raw):
        assert coerce(raw, FieldType.BOOLEAN) is True

    @pytest.mark.parametrize("raw", [False, 0, "false", "0", "No", "off"])
    def test_falsy(self, raw):
        assert coerce(raw, FieldType.BOOLEAN) is False

    @pytest.mark.parametrize("raw", ["maybe", 2, 1.0, []])
    def test_rejects(self, raw):
        with pytest.raises(CoercionError):
            coerce(raw, FieldType.BOOLEAN)


class TestStringCoercion:
    def test_strings_kept_verbatim(self):
        assert coerce(" padded ", FieldType.STRING) == " padded "

    def test_numbers_stringified(self):
        assert coerce(12, FieldType.STRING) == "12"
        assert coerce(1.5, FieldType.STRING) == "1.5"

    @pytest.mark.parametrize("raw", [True, {"a": 1}, ["a"]])
    def test_rejects_structures_and_booleans(self, raw):
        with pytest.raises(CoercionError):
            coerce(raw, FieldType.STRING)


class TestDateCoercion:
    def test_iso_date_string(self):
        assert coerce("2026-01-06", FieldType.DATE) == date(2026, 1, 6)

    def test_datetime_truncated_to_date(self):
        assert coerce(datetime(2026, 1, 6, 14, 5), FieldType.DATE) == date(2026, 1, 6)

    def test_iso_datetime_with_z_suffix(self):
        assert coerce("2026-01-06T14:05:52Z", FieldType.DATETIME) == datetime(2026, 1, 6, 14, 5, 52, tzinfo=UTC)

    @pytest.mark.parametrize("field_type", [FieldType.DATE, FieldType.DATETIME])
    def test_rejects_garbage(self, field_type):
        with pytest.raises(CoercionError):
            coerce("next tuesday", field_type)


class TestListCoercion:
    def test_comma_separated_string(self):
        assert coerce("a, b,,c ", FieldType.LIST) == ["a", "b", "c"]

    def test_list_of_scalars(self):
        assert coerce(["x", 2], FieldType.LIST) == ["x", "2"]

    def test_rejects_nested(self):
        with pytest.raises(CoercionError):
            coerce([{"a": 1}], FieldType.LIST)

    def test_coercion_error_is_value_error(self):
        with pytest.raises(ValueError):
            coerce(5, FieldType.LIST)
