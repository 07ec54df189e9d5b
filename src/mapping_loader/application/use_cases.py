"""Application use-cases consolidating mapping units into one load result."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mapping_loader.adapters.field_builders import WildcardFieldMappingBuilder
from mapping_loader.adapters.processors import DefaultMappingProcessor
from mapping_loader.application.options import DEFAULT_PASS_THROUGH_TYPE, LoadOptions
from mapping_loader.application.ports import (
    DefaultFieldMappingBuilder,
    MappingProcessor,
)
from mapping_loader.application.results import LoadResult
from mapping_loader.converters import ByReferenceConverter, qualified_name
from mapping_loader.errors import MultipleGlobalConfigError
from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import (
    ConverterDescription,
    CustomConverterContainer,
    GlobalConfig,
    MappingUnit,
)
from mapping_loader.types import TypeName

logger = logging.getLogger(__name__)


def _describe_unit(unit: MappingUnit, index: int) -> str:
    return unit.source or f"unit #{index}"


def resolve_configuration(units: Sequence[MappingUnit]) -> GlobalConfig:
    """Find the single global configuration across ``units``.

    Parameters
    ----------
    units : Sequence[MappingUnit]
        Mapping units of one load call.

    Returns
    -------
    GlobalConfig
        A private copy of the only declared configuration, or a default
        configuration when no unit declares one.

    Raises
    ------
    MultipleGlobalConfigError
        If more than one unit declares a configuration.
    """
    declaring = [
        (index, unit) for index, unit in enumerate(units) if unit.configuration is not None
    ]
    if len(declaring) > 1:
        sources = ", ".join(_describe_unit(unit, index) for index, unit in declaring)
        raise MultipleGlobalConfigError(
            "More than one global configuration found "
            f"({sources}). Only one global configuration can be specified "
            "across all mapping units; consolidate them into a single one."
        )
    if not declaring:
        logger.debug("no global configuration declared, using defaults")
        return GlobalConfig()

    index, unit = declaring[0]
    logger.debug("using global configuration from %s", _describe_unit(unit, index))
    return unit.configuration.model_copy(deep=True)


def consolidate_mappings(
    units: Sequence[MappingUnit],
    configuration: GlobalConfig,
    processor: MappingProcessor,
    builder: DefaultFieldMappingBuilder,
) -> ClassMappings:
    """Process every unit's class mappings and merge them into one table.

    Collaborator errors propagate unchanged.
    """
    mappings = ClassMappings()
    for unit in units:
        processed = processor.process_mappings(unit.class_mappings, configuration)
        mappings.add_all(processed)

    # Each mapping's own wildcard flag decides whether defaults are added.
    builder.add_default_field_mappings(mappings, configuration)
    return mappings


def collect_converters(configuration: GlobalConfig) -> list[ConverterDescription]:
    """Return declared converters, deduplicated in order of first appearance."""
    container = configuration.custom_converters
    if container is None or not container.converters:
        return []
    return list(dict.fromkeys(container.converters))


def propagate_converters(
    mappings: ClassMappings, converters: Sequence[ConverterDescription]
) -> None:
    """Give every class mapping its own copy of ``converters``."""
    for mapping in mappings:
        if mapping.custom_converters is None:
            mapping.custom_converters = CustomConverterContainer()
        mapping.custom_converters.converters = list(converters)


def ensure_default_converter(
    configuration: GlobalConfig,
    pass_through_type: TypeName = DEFAULT_PASS_THROUGH_TYPE,
) -> None:
    """Register the by-reference converter for ``pass_through_type``.

    Only configurations that already carry a custom-converter container are
    touched, and the converter is added at most once.
    """
    container = configuration.custom_converters
    if container is None:
        return
    if container.find_converter(pass_through_type, pass_through_type) is not None:
        return
    container.add_converter(
        ConverterDescription(
            class_a=pass_through_type,
            class_b=pass_through_type,
            converter_type=qualified_name(ByReferenceConverter),
        )
    )


def load_mappings(
    units: Sequence[MappingUnit],
    *,
    options: LoadOptions | None = None,
    processor: MappingProcessor | None = None,
    builder: DefaultFieldMappingBuilder | None = None,
) -> LoadResult:
    """Use-case: consolidate mapping units into a load result ready for mapping.

    Parameters
    ----------
    units : Sequence[MappingUnit]
        Parsed mapping units. They are not modified.
    options : LoadOptions | None, optional
        Load options; defaults to :class:`LoadOptions`.
    processor : MappingProcessor | None, optional
        Per-unit mapping processor; defaults to
        :class:`~mapping_loader.adapters.processors.DefaultMappingProcessor`.
    builder : DefaultFieldMappingBuilder | None, optional
        Default field-mapping builder; defaults to an empty-registry
        :class:`~mapping_loader.adapters.field_builders.WildcardFieldMappingBuilder`.

    Returns
    -------
    LoadResult
        Consolidated mappings and the resolved global configuration.

    Raises
    ------
    MultipleGlobalConfigError
        If more than one unit declares a global configuration.
    """
    options = options or LoadOptions()
    processor = processor or DefaultMappingProcessor()
    builder = builder or WildcardFieldMappingBuilder()

    configuration = resolve_configuration(units)
    mappings = consolidate_mappings(units, configuration, processor, builder)
    converters = collect_converters(configuration)
    propagate_converters(mappings, converters)
    ensure_default_converter(configuration, options.pass_through_type)

    logger.debug(
        "loaded %d class mappings from %d units with %d custom converters",
        len(mappings),
        len(units),
        len(converters),
    )
    return LoadResult(mappings=mappings, configuration=configuration)
