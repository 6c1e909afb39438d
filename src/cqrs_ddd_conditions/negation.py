"""
Comparator negation tables.

Each condition type declares one ``NegationTable``: an ordered set of
``ComparatorRule`` rows mapping a comparator to its logical complement and
to the SQL operator template it encodes to.  The table is the single
source of truth for the comparator vocabulary of a type and for how an
inverted condition is encoded.

Tables are validated once, when built, so an asymmetric or malformed table
fails at import time instead of silently producing wrong SQL.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .exceptions import NegationTableError

COLUMN_PLACEHOLDER = "column"
VALUE_PLACEHOLDER = "?"


@dataclass(frozen=True)
class ComparatorRule:
    """
    One row of a negation table.

    Attributes:
        comparator: Caller-facing comparator name (e.g. ``"greater than"``).
        negation: The comparator that is this one's logical complement.
        template: Operator template with one ``column`` and one ``?``
            placeholder (e.g. ``"column > ?"``).
        bind: Optional transform applied to the bound value when this
            rule's template is emitted.
    """

    comparator: str
    negation: str
    template: str
    bind: Callable[[Any], Any] | None = None

    def bind_value(self, value: Any) -> Any:
        return self.bind(value) if self.bind is not None else value


class NegationTable:
    """
    Validated, read-only mapping ``comparator -> ComparatorRule``.

    Usage::

        table = NegationTable(
            ComparatorRule("equals", "does not equal", "column = ?"),
            ComparatorRule("does not equal", "equals", "column != ?"),
        )
        table.negated("equals").template  # "column != ?"
    """

    def __init__(self, *rules: ComparatorRule) -> None:
        if not rules:
            raise NegationTableError("A negation table needs at least one rule")
        rows: dict[str, ComparatorRule] = {}
        for rule in rules:
            if rule.comparator in rows:
                raise NegationTableError(
                    f"Duplicate comparator '{rule.comparator}' in negation table"
                )
            rows[rule.comparator] = rule
        self._rules = rows
        self._check_consistency()

    # -- look-up -------------------------------------------------------------

    @property
    def comparators(self) -> tuple[str, ...]:
        """Comparators in declaration order."""
        return tuple(self._rules)

    def get(self, comparator: str) -> ComparatorRule | None:
        return self._rules.get(comparator)

    def negated(self, comparator: str) -> ComparatorRule:
        """Return the rule of *comparator*'s complement."""
        return self._rules[self._rules[comparator].negation]

    def __contains__(self, comparator: object) -> bool:
        return comparator in self._rules

    def __iter__(self) -> Iterator[ComparatorRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    # -- validation ----------------------------------------------------------

    def _check_consistency(self) -> None:
        for rule in self._rules.values():
            if rule.negation == rule.comparator:
                raise NegationTableError(
                    f"Comparator '{rule.comparator}' cannot negate itself"
                )
            partner = self._rules.get(rule.negation)
            if partner is None:
                raise NegationTableError(
                    f"Negation '{rule.negation}' of '{rule.comparator}' "
                    f"is not declared in the table"
                )
            if partner.negation != rule.comparator:
                raise NegationTableError(
                    f"Asymmetric negation: '{rule.comparator}' -> "
                    f"'{rule.negation}' but '{partner.comparator}' -> "
                    f"'{partner.negation}'"
                )
            _check_template(rule)


def _check_template(rule: ComparatorRule) -> None:
    if rule.template.count(COLUMN_PLACEHOLDER) != 1:
        raise NegationTableError(
            f"Template for '{rule.comparator}' must reference "
            f"'{COLUMN_PLACEHOLDER}' exactly once: {rule.template!r}"
        )
    if rule.template.count(VALUE_PLACEHOLDER) != 1:
        raise NegationTableError(
            f"Template for '{rule.comparator}' must contain exactly one "
            f"'{VALUE_PLACEHOLDER}' placeholder: {rule.template!r}"
        )
