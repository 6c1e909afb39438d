"""Tests for the boolean condition type."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions.exceptions import ValueTypeMismatchError
from cqrs_ddd_conditions.types.boolean import BooleanType


@pytest.fixture
def boolean() -> BooleanType:
    return BooleanType()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, True), (False, False), ("true", True), ("FALSE", False), ("True", True)],
)
def test_accepted_values(boolean: BooleanType, raw: object, expected: bool):
    assert boolean.parse_value({}, raw) is expected


@pytest.mark.parametrize("raw", [1, 0, "yes", "", None, "t"])
def test_rejected_values(boolean: BooleanType, raw: object):
    with pytest.raises(ValueTypeMismatchError):
        boolean.parse_value({}, raw)


def test_rejects_options(boolean: BooleanType):
    with pytest.raises(ValueError, match="allow_decimal"):
        boolean.validate_options({"allow_decimal": True})
