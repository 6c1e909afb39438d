"""Boolean condition type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..exceptions import ValueTypeMismatchError
from ..negation import ComparatorRule, NegationTable
from .base import ConditionType

BOOLEAN_NEGATIONS = NegationTable(
    ComparatorRule("equals", "does not equal", "column = ?"),
    ComparatorRule("does not equal", "equals", "column != ?"),
)

_TEXT_VALUES = {"true": True, "false": False}


class BooleanType(ConditionType):
    @property
    def type_tag(self) -> str:
        return "boolean"

    @property
    def negation_table(self) -> NegationTable:
        return BOOLEAN_NEGATIONS

    def parse_value(self, options: Mapping[str, Any], raw_value: Any) -> Any:
        if isinstance(raw_value, bool):
            return raw_value
        if isinstance(raw_value, str) and raw_value.lower() in _TEXT_VALUES:
            return _TEXT_VALUES[raw_value.lower()]
        raise ValueTypeMismatchError(raw_value, self.type_tag)
