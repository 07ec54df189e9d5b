"""Unit tests for mapping schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mapping_loader.schemas import (
    ClassMapping,
    ConverterDescription,
    CustomConverterContainer,
    FieldMapping,
    GlobalConfig,
    MappingUnit,
)


def test_converter_description_equality_is_structural(
    foo_bar_converter: ConverterDescription,
) -> None:
    """Equal fields make equal, hash-identical descriptions."""
    twin = ConverterDescription(
        class_a="app.Foo", class_b="app.Bar", converter_type="app.FooBarConverter"
    )
    assert twin == foo_bar_converter
    assert twin is not foo_bar_converter
    assert len({twin, foo_bar_converter}) == 1


def test_converter_description_is_frozen(foo_bar_converter: ConverterDescription) -> None:
    """Reject mutation of a converter description."""
    with pytest.raises(ValidationError):
        foo_bar_converter.class_a = "app.Baz"  # type: ignore[misc]


def test_container_find_converter_matches_exact_ordered_pair(
    foo_bar_converter: ConverterDescription,
) -> None:
    """Find converters by ordered pair only."""
    container = CustomConverterContainer(converters=[foo_bar_converter])
    assert container.find_converter("app.Foo", "app.Bar") == foo_bar_converter
    assert container.find_converter("app.Bar", "app.Foo") is None


def test_container_add_converter_initialises_missing_list(
    foo_bar_converter: ConverterDescription,
) -> None:
    """Create the converter list on first add when it is absent."""
    container = CustomConverterContainer(converters=None)
    container.add_converter(foo_bar_converter)
    assert container.converters == [foo_bar_converter]


def test_global_config_defaults() -> None:
    """Expose documented defaults and no converter container."""
    config = GlobalConfig()
    assert config.wildcard is True
    assert config.wildcard_case_insensitive is False
    assert config.stop_on_errors is True
    assert config.relationship_type == "cumulative"
    assert config.custom_converters is None
    assert config.copy_by_references is None
    assert config == GlobalConfig()


def test_global_config_rejects_unknown_options() -> None:
    """Forbid unknown configuration keys."""
    with pytest.raises(ValidationError):
        GlobalConfig(wildcards=False)  # type: ignore[call-arg]


def test_class_mapping_requires_type_names() -> None:
    """Reject empty type names."""
    with pytest.raises(ValidationError):
        ClassMapping(class_a="", class_b="app.B")


def test_class_mapping_effective_wildcard_falls_back_to_global() -> None:
    """Use the global wildcard policy when the mapping leaves it unset."""
    mapping = ClassMapping(class_a="app.A", class_b="app.B")
    assert mapping.is_wildcard(GlobalConfig(wildcard=False)) is False
    mapping.wildcard = True
    assert mapping.is_wildcard(GlobalConfig(wildcard=False)) is True
    assert (
        mapping.is_wildcard_case_insensitive(GlobalConfig(wildcard_case_insensitive=True))
        is True
    )


def test_class_mapping_key_includes_map_id() -> None:
    """Build identity keys from both types and the map id."""
    mapping = ClassMapping(class_a="app.A", class_b="app.B", map_id="summary")
    assert mapping.key == ("app.A", "app.B", "summary")


def test_field_mapping_strips_names() -> None:
    """Normalise surrounding whitespace in field names."""
    field_mapping = FieldMapping(a=" id ", b="identifier ")
    assert (field_mapping.a, field_mapping.b) == ("id", "identifier")


def test_mapping_unit_validates_from_json() -> None:
    """Build a mapping unit from its JSON serialisation."""
    unit = MappingUnit.model_validate_json(
        '{"configuration": {"wildcard": false},'
        ' "class_mappings": [{"class_a": "app.A", "class_b": "app.B",'
        ' "direction": "one-way", "field_mappings": [{"a": "x", "b": "y"}]}]}'
    )
    assert unit.configuration == GlobalConfig(wildcard=False)
    assert unit.class_mappings[0].direction == "one-way"
    assert unit.class_mappings[0].field_mappings[0].b == "y"


def test_mapping_unit_rejects_unknown_direction() -> None:
    """Reject directions other than bidirectional and one-way."""
    with pytest.raises(ValidationError):
        MappingUnit.model_validate(
            {"class_mappings": [{"class_a": "a", "class_b": "b", "direction": "both"}]}
        )
