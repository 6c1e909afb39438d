"""ConditionParser — one predicate description -> validated Condition."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, StrictBool
from pydantic import ValidationError as PydanticValidationError

from .condition import Condition
from .config import all_keys, config_for
from .exceptions import (
    ConditionParseError,
    MalformedConditionError,
    UnknownColumnError,
    UnknownComparatorError,
)

if TYPE_CHECKING:
    from .config import ConditionConfig
    from .registry import ConditionTypeRegistry
    from .types.base import ConditionType

logger = logging.getLogger("cqrs_ddd.conditions")


class ConditionInput(BaseModel):
    """Raw predicate description as received from a caller."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    column: str
    comparator: str
    value: Any
    inverse: StrictBool = False


@dataclass(frozen=True)
class ParseResult:
    """
    Tagged outcome of a parse.

    Usage::

        result = parser.try_parse("rating", "greater than", "4.5")
        if result.ok:
            fragment = encoder.encode(result.condition)
        else:
            payload = result.error.to_dict()
    """

    condition: Condition | None = None
    error: ConditionParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, condition: Condition) -> ParseResult:
        return cls(condition=condition)

    @classmethod
    def failure(cls, error: ConditionParseError) -> ParseResult:
        return cls(error=error)

    def unwrap(self) -> Condition:
        """Return the condition or raise the captured error."""
        if self.error is not None:
            raise self.error
        if self.condition is None:
            raise ValueError("ParseResult holds neither a condition nor an error")
        return self.condition


class ConditionParser:
    """Resolve a column against the whitelist and validate one predicate."""

    def __init__(
        self,
        configs: Sequence[ConditionConfig],
        registry: ConditionTypeRegistry,
    ) -> None:
        """
        Initialize ConditionParser with a whitelist and a type registry.

        Args:
            configs: Column whitelist, typically from ``ConfigBuilder.build()``.
            registry: ConditionTypeRegistry resolving each config's type tag.
        """
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use build_default_registry() from "
                "cqrs_ddd_conditions.types to create one."
            )
        self._configs = tuple(configs)
        self._registry = registry

    @property
    def configs(self) -> tuple[ConditionConfig, ...]:
        return self._configs

    def parse(
        self,
        column: str,
        comparator: str,
        value: Any,
        inverse: bool = False,
    ) -> Condition:
        """
        Return a validated Condition.

        When both the comparator and the value are invalid, the comparator
        error is raised, chained to the value error.

        Raises:
            UnknownColumnError: No config governs *column*.
            UnknownComparatorError: *comparator* is not in the type's vocabulary.
            ValueTypeMismatchError: *value* cannot be coerced.
            ValueNotAllowedError: *value* fails ``allowed_values``.
            ConditionTypeNotFoundError: The config's type is not registered.
        """
        config = config_for(self._configs, column)
        if config is None:
            raise UnknownColumnError(column, all_keys(self._configs))
        condition_type = self._registry.get(config.type)

        comparator_error = self._check_comparator(condition_type, column, comparator)
        try:
            parsed_value = condition_type.parse_value(config.options, value)
        except ConditionParseError as exc:
            exc.column = column
            if comparator_error is not None:
                raise comparator_error from exc
            raise
        if comparator_error is not None:
            raise comparator_error

        condition = Condition(
            type=condition_type.type_tag,
            column=column,
            comparator=comparator,
            value=parsed_value,
            inverse=inverse,
        )
        logger.debug("Parsed condition %r", condition)
        return condition

    def parse_dict(self, data: Mapping[str, Any]) -> Condition:
        """
        Validate a ``{column, comparator, value, inverse}`` mapping and parse it.

        Raises:
            MalformedConditionError: The mapping has the wrong shape.
        """
        try:
            raw = ConditionInput.model_validate(data)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                errors.setdefault(loc or "__root__", []).append(
                    error.get("msg", "validation error")
                )
            raise MalformedConditionError(errors) from exc
        return self.parse(raw.column, raw.comparator, raw.value, raw.inverse)

    # -- tagged-result variants ----------------------------------------------

    def try_parse(
        self,
        column: str,
        comparator: str,
        value: Any,
        inverse: bool = False,
    ) -> ParseResult:
        """Like :meth:`parse` but return a ParseResult instead of raising."""
        try:
            return ParseResult.success(self.parse(column, comparator, value, inverse))
        except ConditionParseError as exc:
            return ParseResult.failure(exc)

    def try_parse_dict(self, data: Mapping[str, Any]) -> ParseResult:
        """Like :meth:`parse_dict` but return a ParseResult instead of raising."""
        try:
            return ParseResult.success(self.parse_dict(data))
        except ConditionParseError as exc:
            return ParseResult.failure(exc)

    # -- internals -----------------------------------------------------------

    @staticmethod
    def _check_comparator(
        condition_type: ConditionType, column: str, comparator: Any
    ) -> UnknownComparatorError | None:
        if isinstance(comparator, str) and comparator in condition_type.negation_table:
            return None
        return UnknownComparatorError(
            comparator,
            condition_type.type_tag,
            list(condition_type.comparators),
            column=column,
        )
