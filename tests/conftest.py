"""Shared fixtures for condition tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions.config import ConfigBuilder
from cqrs_ddd_conditions.encoder import ConditionEncoder
from cqrs_ddd_conditions.parser import ConditionParser
from cqrs_ddd_conditions.types import build_default_registry


@pytest.fixture
def registry():
    """Default condition type registry."""
    return build_default_registry()


@pytest.fixture
def configs(registry):
    """A whitelist covering every built-in type."""
    return (
        ConfigBuilder(registry)
        .number("rating", allow_decimal=True)
        .number("count", allowed_values=[1, 2, 3])
        .text(["title", "description"])
        .date("posted")
        .boolean("published")
        .build()
    )


@pytest.fixture
def parser(configs, registry):
    return ConditionParser(configs, registry)


@pytest.fixture
def encoder(registry):
    return ConditionEncoder(registry)
