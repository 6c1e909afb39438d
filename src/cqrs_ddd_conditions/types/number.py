"""
Number condition type: integer and decimal filters.

Comparators::

    equals, does not equal,
    greater than, less than or,
    less than, greater than or

Options:

==================  ======================  ===================================
Key                 Type                    Description
==================  ======================  ===================================
``allow_decimal``   ``bool``                required to accept decimal values
``allowed_values``  collection / ``Bounds`` value must be a member / in bounds
==================  ======================  ===================================
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

from ..exceptions import ValueNotAllowedError, ValueTypeMismatchError
from ..negation import ComparatorRule, NegationTable
from ..utils import parse_strict_float, parse_strict_int
from .base import EXPLICIT_SET_TYPES, Bounds, ConditionType

NUMBER_NEGATIONS = NegationTable(
    ComparatorRule("equals", "does not equal", "column = ?"),
    ComparatorRule("does not equal", "equals", "column != ?"),
    ComparatorRule("greater than", "less than or", "column > ?"),
    ComparatorRule("less than or", "greater than", "column <= ?"),
    ComparatorRule("less than", "greater than or", "column < ?"),
    ComparatorRule("greater than or", "less than", "column >= ?"),
)


class NumberType(ConditionType):
    option_names: ClassVar[frozenset[str]] = frozenset(
        {"allow_decimal", "allowed_values"}
    )

    @property
    def type_tag(self) -> str:
        return "number"

    @property
    def negation_table(self) -> NegationTable:
        return NUMBER_NEGATIONS

    def parse_value(self, options: Mapping[str, Any], raw_value: Any) -> Any:
        allow_decimal = options.get("allow_decimal", False) is True

        value = raw_value
        if isinstance(value, str):
            value = self._parse_text(value, allow_decimal)

        # bool is an int subclass but never a number here
        if isinstance(value, bool):
            raise ValueTypeMismatchError(raw_value, self.type_tag)
        if isinstance(value, int):
            return self._check_integer(options, value)
        if isinstance(value, float | Decimal):
            if not allow_decimal:
                raise ValueTypeMismatchError(
                    raw_value, self.type_tag, reason="decimal values not allowed"
                )
            if not _is_finite(value):
                raise ValueTypeMismatchError(raw_value, self.type_tag)
            return self._check_decimal(options, value)
        raise ValueTypeMismatchError(raw_value, self.type_tag)

    # -- internals -----------------------------------------------------------

    def _parse_text(self, text: str, allow_decimal: bool) -> int | float:
        parsed: int | float | None
        if allow_decimal:
            parsed = parse_strict_float(text)
        else:
            parsed = parse_strict_int(text)
        if parsed is None:
            raise ValueTypeMismatchError(
                text,
                self.type_tag,
                reason="not a decimal" if allow_decimal else "not an integer",
            )
        return parsed

    def _check_decimal(
        self, options: Mapping[str, Any], value: float | Decimal
    ) -> float | Decimal:
        allowed = options.get("allowed_values")
        if allowed is None:
            return value
        if isinstance(allowed, (Bounds, *EXPLICIT_SET_TYPES)):
            try:
                in_allowed = value in allowed
            except TypeError as exc:
                raise ValueTypeMismatchError(
                    value, self.type_tag, reason="allowed_values not comparable"
                ) from exc
            if in_allowed:
                return value
            raise ValueNotAllowedError(value, self.type_tag)
        raise ValueTypeMismatchError(
            value, self.type_tag, reason="unsupported allowed_values"
        )

    def _check_integer(self, options: Mapping[str, Any], value: int) -> int:
        allowed = options.get("allowed_values")
        if allowed is None:
            return value
        if isinstance(allowed, EXPLICIT_SET_TYPES):
            if value in allowed:
                return value
            raise ValueNotAllowedError(value, self.type_tag)
        raise ValueTypeMismatchError(
            value, self.type_tag, reason="integer values only take a set of values"
        )


def _is_finite(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)
