"""Default collaborators used by the load use-case."""

from .field_builders import WildcardFieldMappingBuilder
from .processors import DefaultMappingProcessor

__all__ = ["DefaultMappingProcessor", "WildcardFieldMappingBuilder"]
