"""
ConditionEncoder — Condition -> ``(operator_template, bound_value)``.

Inversion never wraps the comparison in ``NOT (...)``: under three-valued
logic ``NOT (col > ?)`` is not the complement of ``col > ?`` once ``col``
is NULL.  An inverted condition is encoded with the template of its
comparator's negation from the type's negation table instead, so every
fragment stays a single flat comparison.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .condition import Fragment
from .exceptions import EncodingError

if TYPE_CHECKING:
    from .condition import Condition
    from .registry import ConditionTypeRegistry

logger = logging.getLogger("cqrs_ddd.conditions")


class ConditionEncoder:
    """
    Encode conditions using the negation tables of a registry.

    Usage::

        encoder = ConditionEncoder(registry)
        encoder.encode(condition)  # Fragment("column <= ?", 4.5)
    """

    def __init__(self, registry: ConditionTypeRegistry) -> None:
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use build_default_registry() from "
                "cqrs_ddd_conditions.types to create one."
            )
        self._registry = registry

    def encode(self, condition: Condition) -> Fragment:
        """
        Return the fragment for *condition*.

        Raises:
            EncodingError: The comparator is not in the type's table.
                The parser never produces such a condition.
        """
        table = self._registry.get(condition.type).negation_table
        rule = table.get(condition.comparator)
        if rule is None:
            raise EncodingError(
                f"Comparator '{condition.comparator}' is not defined "
                f"for {condition.type} conditions"
            )
        if condition.inverse:
            rule = table.negated(condition.comparator)

        fragment = Fragment(rule.template, rule.bind_value(condition.value))
        logger.debug(
            "Encoded %s condition on %r as %r",
            condition.type,
            condition.column,
            fragment,
        )
        return fragment
