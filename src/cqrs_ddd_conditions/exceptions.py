"""
Condition exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``ConditionError`` and provide
``to_dict()`` for API-friendly error responses.

Parse errors (``ConditionParseError`` subclasses) form the closed set a
caller is expected to handle.  The remaining errors signal configuration
or programming mistakes.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ConditionError(Exception):
    """Base exception for all condition errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConditionParseError(ConditionError):
    """A single predicate could not be turned into a Condition."""

    code: str = "CONDITION_PARSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        column: str | None = None,
        value: Any = None,
    ) -> None:
        self.message = message
        self.column = column
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "column": self.column,
            "value": _printable(self.value),
        }


class UnknownColumnError(ConditionParseError):
    """
    Column is not governed by any config.

    Provides fuzzy-matched suggestions for likely intended columns.
    """

    code = "UNKNOWN_COLUMN"

    def __init__(self, column: str, available_columns: list[str]) -> None:
        self.available_columns = available_columns
        self.suggestions = get_close_matches(
            column, available_columns, n=3, cutoff=0.6
        )

        message = f"Unknown column: '{column}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message, column=column)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "column": self.column,
            "suggestions": self.suggestions,
        }


class UnknownComparatorError(ConditionParseError):
    """
    Comparator is not part of the resolved type's vocabulary.

    Matching is exact; suggestions only help build a better message.
    """

    code = "UNKNOWN_COMPARATOR"

    def __init__(
        self,
        comparator: str,
        type_tag: str,
        valid_comparators: list[str],
        *,
        column: str | None = None,
    ) -> None:
        self.comparator = comparator
        self.type_tag = type_tag
        self.valid_comparators = valid_comparators
        self.suggestions = get_close_matches(
            str(comparator), valid_comparators, n=3, cutoff=0.6
        )

        message = f"Unknown {type_tag} comparator: '{comparator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid comparators: {', '.join(valid_comparators)}"
        super().__init__(message, column=column)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "column": self.column,
            "comparator": self.comparator,
            "suggestions": self.suggestions,
            "valid_comparators": list(self.valid_comparators),
        }


class ValueTypeMismatchError(ConditionParseError):
    """Raw value cannot be coerced into the type's domain."""

    code = "VALUE_TYPE_MISMATCH"

    def __init__(
        self,
        value: Any,
        type_tag: str,
        *,
        column: str | None = None,
        reason: str | None = None,
    ) -> None:
        self.type_tag = type_tag
        self.reason = reason
        message = f"Invalid {type_tag} value: {_printable(value)!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, column=column, value=value)


class ValueNotAllowedError(ConditionParseError):
    """Coerced value fails an ``allowed_values`` constraint."""

    code = "VALUE_NOT_ALLOWED"

    def __init__(
        self,
        value: Any,
        type_tag: str,
        *,
        column: str | None = None,
    ) -> None:
        self.type_tag = type_tag
        message = f"Provided {type_tag} value not allowed: {_printable(value)!r}"
        super().__init__(message, column=column, value=value)


class MalformedConditionError(ConditionParseError):
    """The predicate mapping itself has the wrong shape."""

    code = "MALFORMED_CONDITION"

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        details = "; ".join(
            f"{loc}: {', '.join(msgs)}" for loc, msgs in sorted(errors.items())
        )
        super().__init__(f"Malformed condition: {details}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "errors": self.errors,
        }


class ConditionTypeNotFoundError(ConditionError):
    """A config references a type tag the registry does not know."""

    def __init__(self, type_tag: str, available_types: list[str]) -> None:
        self.type_tag = type_tag
        self.available_types = available_types
        super().__init__(
            f"No condition type registered for '{type_tag}'. "
            f"Registered types: {', '.join(sorted(available_types))}"
        )


class NegationTableError(ConditionError):
    """A comparator negation table violates its consistency rules."""


class EncodingError(ConditionError):
    """A condition reached the encoder with a comparator its type lacks."""


def _printable(value: Any) -> Any:
    """Keep JSON-friendly scalars, stringify everything else."""
    if value is None or isinstance(value, str | int | float | bool):
        return value
    return str(value)
