"""End-to-end parse -> encode scenarios."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions import (
    ConditionEncoder,
    ConditionParser,
    ConfigBuilder,
    UnknownColumnError,
    UnknownComparatorError,
    ValueNotAllowedError,
    build_default_registry,
)


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def rating_parser(registry):
    configs = ConfigBuilder(registry).number("rating", allow_decimal=True).build()
    return ConditionParser(configs, registry)


def test_greater_than_rating(rating_parser, registry):
    condition = rating_parser.parse_dict(
        {
            "column": "rating",
            "comparator": "greater than",
            "value": "4.5",
            "inverse": False,
        }
    )
    assert condition.to_dict() == {
        "type": "number",
        "column": "rating",
        "comparator": "greater than",
        "value": 4.5,
        "inverse": False,
    }
    assert ConditionEncoder(registry).encode(condition) == ("column > ?", 4.5)


def test_inverted_greater_than_rating(rating_parser, registry):
    condition = rating_parser.parse("rating", "greater than", "4.5", inverse=True)
    assert ConditionEncoder(registry).encode(condition) == ("column <= ?", 4.5)


def test_count_not_in_allowed_set(registry):
    configs = (
        ConfigBuilder(registry)
        .number("count", allow_decimal=False, allowed_values=[1, 2, 3])
        .build()
    )
    parser = ConditionParser(configs, registry)
    with pytest.raises(ValueNotAllowedError):
        parser.parse("count", "equals", 5)


def test_contains_against_number(rating_parser):
    with pytest.raises(UnknownComparatorError):
        rating_parser.parse("rating", "contains", "4.5")


def test_column_outside_whitelist(rating_parser):
    with pytest.raises(UnknownColumnError):
        rating_parser.parse("title", "equals", "4.5")
