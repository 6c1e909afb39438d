"""Validated condition and encoded fragment value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from .negation import COLUMN_PLACEHOLDER


@dataclass(frozen=True)
class Condition:
    """
    A single validated filter predicate.

    Only ever produced by :class:`~cqrs_ddd_conditions.parser.ConditionParser`
    once both the comparator and the value passed validation.
    """

    type: str
    column: str
    comparator: str
    value: Any
    inverse: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "column": self.column,
            "comparator": self.comparator,
            "value": self.value,
            "inverse": self.inverse,
        }


class Fragment(NamedTuple):
    """Encoded ``(operator_template, bound_value)`` pair."""

    template: str
    value: Any

    def to_sql(self, column_ref: str) -> tuple[str, list[Any]]:
        """
        Substitute *column_ref* for the column placeholder.

        *column_ref* must be a trusted identifier (a whitelisted column);
        the bound value always travels separately as a parameter.
        """
        return self.template.replace(COLUMN_PLACEHOLDER, column_ref, 1), [self.value]
