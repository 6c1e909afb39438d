"""
Condition type strategy interface.

A condition type covers one value domain (number, text, date, boolean).
It declares the domain's comparator vocabulary through its negation table
and knows how to coerce a raw value under the options of a config.
New domains are added by subclassing ``ConditionType`` and passing an
instance to :class:`~cqrs_ddd_conditions.registry.ConditionTypeRegistry`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ..negation import NegationTable

#: Collection types accepted as the explicit-set form of ``allowed_values``.
EXPLICIT_SET_TYPES = (list, tuple, set, frozenset, range)


@dataclass(frozen=True)
class Bounds:
    """Inclusive ``low <= value <= high`` form of ``allowed_values``."""

    low: Any
    high: Any

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(
                f"Bounds low ({self.low!r}) must not exceed high ({self.high!r})"
            )

    def __contains__(self, value: Any) -> bool:
        return bool(self.low <= value <= self.high)


class ConditionType(ABC):
    """
    Strategy interface for one value domain.

    Implementations must be stateless: ``parse_value`` is a pure function
    of its arguments.
    """

    #: Option names this type understands.
    option_names: ClassVar[frozenset[str]] = frozenset()

    @property
    @abstractmethod
    def type_tag(self) -> str:
        """Stable identifier referenced by configs."""
        ...

    @property
    @abstractmethod
    def negation_table(self) -> NegationTable:
        """Comparator → (negation, template) table for this domain."""
        ...

    @property
    def comparators(self) -> tuple[str, ...]:
        """Accepted comparators, in declaration order."""
        return self.negation_table.comparators

    @abstractmethod
    def parse_value(self, options: Mapping[str, Any], raw_value: Any) -> Any:
        """
        Coerce *raw_value* into the domain.

        Args:
            options: The ``options`` of the config governing the column.
            raw_value: Value as supplied by the caller.

        Returns:
            The coerced, domain-typed value.

        Raises:
            ValueTypeMismatchError: The value cannot be coerced.
            ValueNotAllowedError: The value fails an ``allowed_values``
                constraint.
        """
        ...

    def validate_options(self, options: Mapping[str, Any]) -> None:
        """Raise ``ValueError`` for option names this type does not know."""
        unknown = set(options) - self.option_names
        if unknown:
            raise ValueError(
                f"Unknown option(s) for {self.type_tag} condition: "
                f"{', '.join(sorted(unknown))}"
            )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type_tag!r}>"
