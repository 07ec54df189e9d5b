"""Unit tests for the wildcard default field-mapping builder."""

from __future__ import annotations

import pytest

from mapping_loader.adapters.field_builders import WildcardFieldMappingBuilder
from mapping_loader.descriptors import TypeRegistry
from mapping_loader.errors import UnknownTypeError
from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import ClassMapping, FieldMapping, GlobalConfig


@pytest.fixture
def registry() -> TypeRegistry:
    registry = TypeRegistry()
    registry.register("app.Order", ["id", "customer", "total", "internal"])
    registry.register("app.OrderDto", ["id", "customer", "amount"])
    return registry


def _fields(mapping: ClassMapping) -> list[tuple[str, str, bool]]:
    return [(f.a, f.b, f.generated) for f in mapping.field_mappings]


def test_adds_same_named_fields(registry: TypeRegistry) -> None:
    """Map destination fields that have a same-named source field."""
    mapping = ClassMapping(class_a="app.Order", class_b="app.OrderDto", wildcard=True)
    WildcardFieldMappingBuilder(registry).add_default_field_mappings(
        ClassMappings([mapping]), GlobalConfig()
    )
    assert _fields(mapping) == [("id", "id", True), ("customer", "customer", True)]


def test_respects_explicit_and_excluded_fields(registry: TypeRegistry) -> None:
    """Skip destination fields already mapped or excluded."""
    mapping = ClassMapping(
        class_a="app.Order",
        class_b="app.OrderDto",
        field_mappings=[
            FieldMapping(a="total", b="amount"),
            FieldMapping(a="id", b="id", excluded=True),
        ],
    )
    WildcardFieldMappingBuilder(registry).add_default_field_mappings(
        ClassMappings([mapping]), GlobalConfig()
    )
    assert _fields(mapping) == [
        ("total", "amount", False),
        ("id", "id", False),
        ("customer", "customer", True),
    ]


def test_disabled_wildcard_leaves_mapping_untouched(registry: TypeRegistry) -> None:
    """Use the mapping's own policy, then the global one."""
    explicit_off = ClassMapping(class_a="app.Order", class_b="app.OrderDto", wildcard=False)
    inherits_off = ClassMapping(class_a="app.OrderDto", class_b="app.Order")
    WildcardFieldMappingBuilder(registry).add_default_field_mappings(
        ClassMappings([explicit_off, inherits_off]), GlobalConfig(wildcard=False)
    )
    assert explicit_off.field_mappings == []
    assert inherits_off.field_mappings == []


def test_per_mapping_wildcard_overrides_global(registry: TypeRegistry) -> None:
    mapping = ClassMapping(class_a="app.Order", class_b="app.OrderDto", wildcard=True)
    WildcardFieldMappingBuilder(registry).add_default_field_mappings(
        ClassMappings([mapping]), GlobalConfig(wildcard=False)
    )
    assert len(mapping.field_mappings) == 2


def test_case_insensitive_matching() -> None:
    """Match source fields ignoring case when configured."""
    registry = TypeRegistry()
    registry.register("A", ["OrderId"])
    registry.register("B", ["orderid"])
    mapping = ClassMapping(class_a="A", class_b="B")
    WildcardFieldMappingBuilder(registry).add_default_field_mappings(
        ClassMappings([mapping]), GlobalConfig(wildcard_case_insensitive=True)
    )
    assert _fields(mapping) == [("OrderId", "orderid", True)]


def test_repeated_calls_add_nothing_new(registry: TypeRegistry) -> None:
    mapping = ClassMapping(class_a="app.Order", class_b="app.OrderDto")
    table = ClassMappings([mapping])
    builder = WildcardFieldMappingBuilder(registry)
    builder.add_default_field_mappings(table, GlobalConfig())
    builder.add_default_field_mappings(table, GlobalConfig())
    assert len(mapping.field_mappings) == 2


def test_unregistered_types_are_skipped_unless_strict() -> None:
    """Skip unknown types by default and fail in strict mode."""
    mapping = ClassMapping(class_a="app.Unknown", class_b="app.Other")
    WildcardFieldMappingBuilder().add_default_field_mappings(
        ClassMappings([mapping]), GlobalConfig()
    )
    assert mapping.field_mappings == []

    with pytest.raises(UnknownTypeError, match="app.Unknown"):
        WildcardFieldMappingBuilder(strict=True).add_default_field_mappings(
            ClassMappings([mapping]), GlobalConfig()
        )
