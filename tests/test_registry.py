"""Tests for the condition type registry."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions.exceptions import ConditionTypeNotFoundError
from cqrs_ddd_conditions.registry import ConditionTypeRegistry
from cqrs_ddd_conditions.types import NumberType, TextType, build_default_registry


def test_default_registry_has_built_in_types():
    registry = build_default_registry()
    assert registry.type_tags == ("number", "text", "date", "boolean")
    assert len(registry) == 4
    assert isinstance(registry.get("number"), NumberType)


def test_default_registry_is_fresh_each_time():
    assert build_default_registry() is not build_default_registry()


def test_unknown_tag():
    registry = ConditionTypeRegistry(NumberType())
    assert registry.has("number")
    assert not registry.has("text")
    with pytest.raises(ConditionTypeNotFoundError, match="'text'"):
        registry.get("text")


def test_duplicate_tag_rejected():
    with pytest.raises(ValueError, match="registered twice"):
        ConditionTypeRegistry(TextType(), TextType())


def test_registry_is_read_only():
    registry = build_default_registry()
    assert not hasattr(registry, "register")
