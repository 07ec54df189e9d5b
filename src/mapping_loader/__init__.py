"""Top-level API for consolidating mapping definitions."""

from __future__ import annotations

from collections.abc import Sequence

from mapping_loader.application.options import LoadOptions
from mapping_loader.application.ports import (
    DefaultFieldMappingBuilder,
    MappingProcessor,
)
from mapping_loader.application.results import LoadResult
from mapping_loader.errors import (
    DuplicateMappingError,
    InvalidMappingError,
    MappingLoaderError,
    MultipleGlobalConfigError,
    UnknownTypeError,
)
from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import (
    ClassMapping,
    ConverterDescription,
    CustomConverterContainer,
    FieldMapping,
    GlobalConfig,
    MappingUnit,
)

__version__ = "0.1.0"


def load_mappings(
    units: Sequence[MappingUnit],
    *,
    options: LoadOptions | None = None,
    processor: MappingProcessor | None = None,
    builder: DefaultFieldMappingBuilder | None = None,
) -> LoadResult:
    """Consolidate mapping units into a single mapping configuration.

    Parameters
    ----------
    units : Sequence[MappingUnit]
        Parsed mapping units; at most one may declare a global configuration.
    options : LoadOptions | None, optional
        Load options.
    processor : MappingProcessor | None, optional
        Per-unit mapping processor override.
    builder : DefaultFieldMappingBuilder | None, optional
        Default field-mapping builder override.

    Returns
    -------
    LoadResult
        Consolidated class mappings and the resolved global configuration.
    """
    from .application.use_cases import load_mappings as _impl

    return _impl(units, options=options, processor=processor, builder=builder)


__all__ = [
    "ClassMapping",
    "ClassMappings",
    "ConverterDescription",
    "CustomConverterContainer",
    "DuplicateMappingError",
    "FieldMapping",
    "GlobalConfig",
    "InvalidMappingError",
    "LoadOptions",
    "LoadResult",
    "MappingLoaderError",
    "MappingUnit",
    "MultipleGlobalConfigError",
    "UnknownTypeError",
    "load_mappings",
]
