"""
Date condition type.

Comparators::

    equals, does not equal,
    after, on or before,
    before, on or after

Options:

==================  ============  =========================================
Key                 Type          Description
==================  ============  =========================================
``format``          ``str``       ``strptime`` pattern; ISO-8601 if absent
``allowed_values``  ``Bounds``    inclusive date range
==================  ============  =========================================
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any, ClassVar

from ..exceptions import ValueNotAllowedError, ValueTypeMismatchError
from ..negation import ComparatorRule, NegationTable
from .base import Bounds, ConditionType

DATE_NEGATIONS = NegationTable(
    ComparatorRule("equals", "does not equal", "column = ?"),
    ComparatorRule("does not equal", "equals", "column != ?"),
    ComparatorRule("after", "on or before", "column > ?"),
    ComparatorRule("on or before", "after", "column <= ?"),
    ComparatorRule("before", "on or after", "column < ?"),
    ComparatorRule("on or after", "before", "column >= ?"),
)


class DateType(ConditionType):
    option_names: ClassVar[frozenset[str]] = frozenset({"format", "allowed_values"})

    @property
    def type_tag(self) -> str:
        return "date"

    @property
    def negation_table(self) -> NegationTable:
        return DATE_NEGATIONS

    def parse_value(self, options: Mapping[str, Any], raw_value: Any) -> Any:
        value = self._to_date(options, raw_value)

        allowed = options.get("allowed_values")
        if allowed is None:
            return value
        if not isinstance(allowed, Bounds):
            raise ValueTypeMismatchError(
                raw_value, self.type_tag, reason="unsupported allowed_values"
            )
        bounds = Bounds(_as_date(allowed.low), _as_date(allowed.high))
        try:
            in_bounds = value in bounds
        except TypeError as exc:
            raise ValueTypeMismatchError(
                raw_value, self.type_tag, reason="allowed_values not comparable"
            ) from exc
        if not in_bounds:
            raise ValueNotAllowedError(value, self.type_tag)
        return value

    def _to_date(self, options: Mapping[str, Any], raw_value: Any) -> datetime.date:
        if isinstance(raw_value, datetime.datetime):
            return raw_value.date()
        if isinstance(raw_value, datetime.date):
            return raw_value
        if not isinstance(raw_value, str):
            raise ValueTypeMismatchError(raw_value, self.type_tag)

        fmt = options.get("format")
        try:
            if fmt:
                return datetime.datetime.strptime(raw_value, fmt).date()
            return datetime.date.fromisoformat(raw_value)
        except ValueError as exc:
            raise ValueTypeMismatchError(
                raw_value, self.type_tag, reason=f"expected {fmt or 'ISO-8601'}"
            ) from exc


def _as_date(bound: Any) -> Any:
    # datetime subclasses date but does not compare with it
    if isinstance(bound, datetime.datetime):
        return bound.date()
    return bound
