"""Application-layer use-cases, ports and option objects."""

from __future__ import annotations

from mapping_loader.application.options import LoadOptions
from mapping_loader.application.ports import (
    DefaultFieldMappingBuilder,
    MappingProcessor,
)
from mapping_loader.application.results import LoadResult
from mapping_loader.application.use_cases import (
    collect_converters,
    consolidate_mappings,
    ensure_default_converter,
    load_mappings,
    propagate_converters,
    resolve_configuration,
)

__all__ = [
    "DefaultFieldMappingBuilder",
    "LoadOptions",
    "LoadResult",
    "MappingProcessor",
    "collect_converters",
    "consolidate_mappings",
    "ensure_default_converter",
    "load_mappings",
    "propagate_converters",
    "resolve_configuration",
]
