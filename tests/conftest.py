"""Shared pytest configuration, marker assignment and mapping fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from mapping_loader.schemas import (
    ClassMapping,
    ConverterDescription,
    CustomConverterContainer,
    GlobalConfig,
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def foo_bar_converter() -> ConverterDescription:
    return ConverterDescription(
        class_a="app.Foo", class_b="app.Bar", converter_type="app.FooBarConverter"
    )


@pytest.fixture
def config_with_converters(foo_bar_converter: ConverterDescription) -> GlobalConfig:
    return GlobalConfig(
        custom_converters=CustomConverterContainer(converters=[foo_bar_converter])
    )


@pytest.fixture
def order_mapping() -> ClassMapping:
    return ClassMapping(class_a="app.Order", class_b="app.OrderDto")
