"""Application ports for the collaborators the loader delegates to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import ClassMapping, GlobalConfig


class MappingProcessor(Protocol):
    """Decorate raw class mappings of one unit into a mapping table."""

    def process_mappings(
        self,
        class_mappings: Sequence[ClassMapping],
        configuration: GlobalConfig,
    ) -> ClassMappings:
        """Return processed mappings, including synthesised reverse mappings."""


class DefaultFieldMappingBuilder(Protocol):
    """Add wildcard-driven default field mappings in place."""

    def add_default_field_mappings(
        self,
        mappings: ClassMappings,
        configuration: GlobalConfig,
    ) -> None:
        """Complete field mappings of every wildcard-enabled class mapping."""
