"""
Column whitelist configuration.

A ``ConditionConfig`` binds a set of column names to one condition type and
the options that type reads while parsing values.  A whitelist is a plain
sequence of configs; ``ConfigBuilder`` is a convenience for assembling one.

Example::

    configs = (
        ConfigBuilder()
        .number("rating", allow_decimal=True)
        .text(["title", "description"])
        .date("posted", format="%Y-%m-%d")
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import to_strings

if TYPE_CHECKING:
    from .registry import ConditionTypeRegistry

logger = logging.getLogger("cqrs_ddd.conditions")


class ConditionConfig(BaseModel):
    """
    One whitelist entry.

    Attributes:
        type: Tag of the condition type governing ``keys``.
        keys: Column names this entry governs (non-empty).
        options: Type-specific options, e.g. ``{"allow_decimal": True}``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    keys: tuple[str, ...] = Field(min_length=1)
    options: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("keys", mode="before")
    @classmethod
    def _normalise_keys(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, Iterable) and not isinstance(value, Mapping):
            return to_strings(value)
        return value

    @field_validator("options")
    @classmethod
    def _freeze_options(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def governs(self, key: str) -> bool:
        return key in self.keys


# ---------------------------------------------------------------------------
# Look-up helpers
# ---------------------------------------------------------------------------


def is_allowed(configs: Sequence[ConditionConfig], key: str) -> bool:
    """Return whether *key* is listed in any of the configs."""
    return any(c.governs(key) for c in configs)


def config_for(
    configs: Sequence[ConditionConfig], key: str
) -> ConditionConfig | None:
    """Return the first config governing *key*, or ``None``."""
    return next((c for c in configs if c.governs(key)), None)


def configs_for_type(
    configs: Sequence[ConditionConfig], type_tag: str
) -> list[ConditionConfig]:
    """Narrow *configs* to those of *type_tag*."""
    return [c for c in configs if c.type == type_tag]


def options_for(configs: Sequence[ConditionConfig], key: str) -> dict[str, Any]:
    """Return the options of the config governing *key* (empty if none)."""
    config = config_for(configs, key)
    return dict(config.options) if config is not None else {}


def all_keys(configs: Sequence[ConditionConfig]) -> list[str]:
    """Every whitelisted column, in config order."""
    return [key for c in configs for key in c.keys]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class ConfigBuilder:
    """
    Fluent builder for a column whitelist.

    When constructed with a registry, type tags and option names are
    checked as entries are added.  ``build()`` rejects a column listed
    under more than one entry.
    """

    def __init__(self, registry: ConditionTypeRegistry | None = None) -> None:
        self._registry = registry
        self._configs: list[ConditionConfig] = []

    # -- entries -------------------------------------------------------------

    def add(
        self,
        type_tag: str,
        keys: str | Iterable[Any],
        **options: Any,
    ) -> ConfigBuilder:
        """Add an entry for *keys* governed by *type_tag*."""
        if self._registry is not None:
            self._registry.get(type_tag).validate_options(options)
        self._configs.append(
            ConditionConfig(type=type_tag, keys=to_strings(keys), options=options)
        )
        return self

    def number(self, keys: str | Iterable[Any], **options: Any) -> ConfigBuilder:
        return self.add("number", keys, **options)

    def text(self, keys: str | Iterable[Any], **options: Any) -> ConfigBuilder:
        return self.add("text", keys, **options)

    def date(self, keys: str | Iterable[Any], **options: Any) -> ConfigBuilder:
        return self.add("date", keys, **options)

    def boolean(self, keys: str | Iterable[Any], **options: Any) -> ConfigBuilder:
        return self.add("boolean", keys, **options)

    # -- build ---------------------------------------------------------------

    def build(self) -> tuple[ConditionConfig, ...]:
        """
        Return the whitelist.

        Raises:
            ValueError: If a column is governed by more than one entry.
        """
        owners: dict[str, str] = {}
        for config in self._configs:
            for key in config.keys:
                if key in owners:
                    raise ValueError(
                        f"Column '{key}' is configured as both "
                        f"'{owners[key]}' and '{config.type}'"
                    )
                owners[key] = config.type
        logger.debug(
            "Built condition whitelist: %d entries, %d columns",
            len(self._configs),
            len(owners),
        )
        return tuple(self._configs)

    def reset(self) -> ConfigBuilder:
        """Clear all entries and return ``self`` for reuse."""
        self._configs.clear()
        return self
