"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import GlobalConfig


@dataclass(frozen=True)
class LoadResult:
    """Consolidated mappings and the single configuration they were built with."""

    mappings: ClassMappings
    configuration: GlobalConfig
