"""
Condition type registry.

Maps a type tag to its :class:`ConditionType` strategy.  A registry is
built once, from all of its types, and cannot be changed afterwards; pass
the same instance to every parser and encoder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import ConditionTypeNotFoundError

if TYPE_CHECKING:
    from .types.base import ConditionType

logger = logging.getLogger("cqrs_ddd.conditions")


class ConditionTypeRegistry:
    """
    Read-only registry of ConditionType instances keyed by type tag.

    Usage::

        registry = ConditionTypeRegistry(NumberType(), TextType())

        number = registry.get("number")
    """

    def __init__(self, *condition_types: ConditionType) -> None:
        types: dict[str, ConditionType] = {}
        for condition_type in condition_types:
            tag = condition_type.type_tag
            if tag in types:
                raise ValueError(f"Condition type '{tag}' registered twice")
            types[tag] = condition_type
        self._types = types
        logger.debug("Condition type registry built: %s", ", ".join(types))

    # -- look-up -------------------------------------------------------------

    def get(self, type_tag: str) -> ConditionType:
        """
        Return the type registered for *type_tag*.

        Raises:
            ConditionTypeNotFoundError: If the tag is not registered.
        """
        condition_type = self._types.get(type_tag)
        if condition_type is None:
            raise ConditionTypeNotFoundError(type_tag, list(self._types))
        return condition_type

    def has(self, type_tag: str) -> bool:
        return type_tag in self._types

    @property
    def type_tags(self) -> tuple[str, ...]:
        return tuple(self._types)

    def __len__(self) -> int:
        return len(self._types)
