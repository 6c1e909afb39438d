"""Text condition type: equality and case-insensitive substring filters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from ..exceptions import ValueNotAllowedError, ValueTypeMismatchError
from ..negation import ComparatorRule, NegationTable
from ..utils import LIKE_ESCAPE, contains_pattern
from .base import EXPLICIT_SET_TYPES, ConditionType

_LIKE = f"lower(column) LIKE lower(?) ESCAPE '{LIKE_ESCAPE}'"
_NOT_LIKE = f"lower(column) NOT LIKE lower(?) ESCAPE '{LIKE_ESCAPE}'"

TEXT_NEGATIONS = NegationTable(
    ComparatorRule("equals", "does not equal", "column = ?"),
    ComparatorRule("does not equal", "equals", "column != ?"),
    ComparatorRule("contains", "does not contain", _LIKE, bind=contains_pattern),
    ComparatorRule(
        "does not contain", "contains", _NOT_LIKE, bind=contains_pattern
    ),
)


class TextType(ConditionType):
    """
    Options: ``allowed_values`` (explicit set of strings) and
    ``max_length`` (maximum number of characters).
    """

    option_names: ClassVar[frozenset[str]] = frozenset(
        {"allowed_values", "max_length"}
    )

    @property
    def type_tag(self) -> str:
        return "text"

    @property
    def negation_table(self) -> NegationTable:
        return TEXT_NEGATIONS

    def parse_value(self, options: Mapping[str, Any], raw_value: Any) -> Any:
        if not isinstance(raw_value, str) or raw_value == "":
            raise ValueTypeMismatchError(raw_value, self.type_tag)

        max_length = options.get("max_length")
        if max_length is not None and len(raw_value) > max_length:
            raise ValueTypeMismatchError(
                raw_value,
                self.type_tag,
                reason=f"longer than {max_length} characters",
            )

        allowed = options.get("allowed_values")
        if allowed is None:
            return raw_value
        if not isinstance(allowed, EXPLICIT_SET_TYPES):
            raise ValueTypeMismatchError(
                raw_value, self.type_tag, reason="unsupported allowed_values"
            )
        if raw_value not in allowed:
            raise ValueNotAllowedError(raw_value, self.type_tag)
        return raw_value
