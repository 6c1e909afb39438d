"""
Built-in condition types.

Provides one ConditionType per value domain and a factory function to
create registries.

Usage::

    from cqrs_ddd_conditions.types import build_default_registry

    registry = build_default_registry()
    registry.get("number").parse_value({"allow_decimal": True}, "4.5")
"""

from __future__ import annotations

from ..registry import ConditionTypeRegistry
from .base import Bounds, ConditionType
from .boolean import BooleanType
from .date import DateType
from .number import NumberType
from .text import TextType


def build_default_registry() -> ConditionTypeRegistry:
    """
    Create a registry with all built-in condition types.

    Returns a fresh ConditionTypeRegistry instance. Use this to create
    registries for dependency injection.

    Example:
        >>> registry = build_default_registry()
        >>> registry.type_tags
        ('number', 'text', 'date', 'boolean')
    """
    return ConditionTypeRegistry(
        NumberType(),
        TextType(),
        DateType(),
        BooleanType(),
    )


__all__ = [
    "BooleanType",
    "Bounds",
    "ConditionType",
    "ConditionTypeRegistry",
    "DateType",
    "NumberType",
    "TextType",
    "build_default_registry",
]
