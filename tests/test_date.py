"""Tests for the date condition type."""

from __future__ import annotations

import datetime

import pytest

from cqrs_ddd_conditions.config import ConfigBuilder
from cqrs_ddd_conditions.exceptions import (
    ValueNotAllowedError,
    ValueTypeMismatchError,
)
from cqrs_ddd_conditions.parser import ConditionParser
from cqrs_ddd_conditions.types.base import Bounds
from cqrs_ddd_conditions.types.date import DateType


@pytest.fixture
def date() -> DateType:
    return DateType()


def test_iso_text_by_default(date: DateType):
    assert date.parse_value({}, "2024-02-29") == datetime.date(2024, 2, 29)


def test_custom_format(date: DateType):
    options = {"format": "%d/%m/%Y"}
    assert date.parse_value(options, "01/03/2024") == datetime.date(2024, 3, 1)
    with pytest.raises(ValueTypeMismatchError, match="%d/%m/%Y"):
        date.parse_value(options, "2024-03-01")


def test_date_and_datetime_instances(date: DateType):
    day = datetime.date(2024, 1, 1)
    assert date.parse_value({}, day) == day
    moment = datetime.datetime(2024, 1, 1, 12, 30)
    assert date.parse_value({}, moment) == day


@pytest.mark.parametrize("raw", ["2024-13-01", "yesterday", "", 20240101, None])
def test_invalid_dates(date: DateType, raw: object):
    with pytest.raises(ValueTypeMismatchError):
        date.parse_value({}, raw)


def test_bounds(date: DateType):
    options = {
        "allowed_values": Bounds(datetime.date(2024, 1, 1), datetime.date(2024, 12, 31))
    }
    assert date.parse_value(options, "2024-12-31") == datetime.date(2024, 12, 31)
    with pytest.raises(ValueNotAllowedError):
        date.parse_value(options, "2025-01-01")


def test_datetime_bounds_apply_to_dates(date: DateType):
    options = {
        "allowed_values": Bounds(
            datetime.datetime(2024, 1, 1), datetime.datetime(2024, 12, 31, 23, 59)
        )
    }
    assert date.parse_value(options, "2024-06-01") == datetime.date(2024, 6, 1)
    assert date.parse_value(options, "2024-12-31") == datetime.date(2024, 12, 31)
    with pytest.raises(ValueNotAllowedError):
        date.parse_value(options, "2025-01-01")


def test_incomparable_bounds_are_a_type_mismatch(date: DateType):
    options = {"allowed_values": Bounds("2024-01-01", "2024-12-31")}
    with pytest.raises(ValueTypeMismatchError, match="not comparable"):
        date.parse_value(options, "2024-06-01")


def test_datetime_bounds_through_try_parse(registry):
    bounds = Bounds(datetime.datetime(2024, 1, 1), datetime.datetime(2024, 12, 31))
    configs = ConfigBuilder(registry).date("posted", allowed_values=bounds).build()
    result = ConditionParser(configs, registry).try_parse(
        "posted", "equals", "2024-06-01"
    )
    assert result.ok
    assert result.unwrap().value == datetime.date(2024, 6, 1)


def test_explicit_set_is_not_supported(date: DateType):
    with pytest.raises(ValueTypeMismatchError):
        date.parse_value({"allowed_values": ["2024-01-01"]}, "2024-01-01")


def test_comparators(date: DateType):
    assert date.comparators == (
        "equals",
        "does not equal",
        "after",
        "on or before",
        "before",
        "on or after",
    )
