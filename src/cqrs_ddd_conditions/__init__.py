"""Whitelisted filter predicates encoded as parameterized SQL fragments."""

from .condition import Condition, Fragment
from .config import (
    ConditionConfig,
    ConfigBuilder,
    config_for,
    configs_for_type,
    is_allowed,
    options_for,
)
from .encoder import ConditionEncoder
from .exceptions import (
    ConditionError,
    ConditionParseError,
    ConditionTypeNotFoundError,
    EncodingError,
    MalformedConditionError,
    NegationTableError,
    UnknownColumnError,
    UnknownComparatorError,
    ValueNotAllowedError,
    ValueTypeMismatchError,
)
from .negation import ComparatorRule, NegationTable
from .parser import ConditionInput, ConditionParser, ParseResult
from .registry import ConditionTypeRegistry
from .types import (
    BooleanType,
    Bounds,
    ConditionType,
    DateType,
    NumberType,
    TextType,
    build_default_registry,
)

__all__ = [
    # Core types
    "Condition",
    "Fragment",
    "ConditionType",
    "NumberType",
    "TextType",
    "DateType",
    "BooleanType",
    "Bounds",
    # Negation tables
    "ComparatorRule",
    "NegationTable",
    # Registry
    "ConditionTypeRegistry",
    "build_default_registry",
    # Whitelist
    "ConditionConfig",
    "ConfigBuilder",
    "config_for",
    "configs_for_type",
    "is_allowed",
    "options_for",
    # Parse / encode
    "ConditionInput",
    "ConditionParser",
    "ParseResult",
    "ConditionEncoder",
    # Exceptions
    "ConditionError",
    "ConditionParseError",
    "UnknownColumnError",
    "UnknownComparatorError",
    "ValueTypeMismatchError",
    "ValueNotAllowedError",
    "MalformedConditionError",
    "ConditionTypeNotFoundError",
    "NegationTableError",
    "EncodingError",
]
