"""Exception hierarchy for mapping consolidation."""

from __future__ import annotations


class MappingLoaderError(Exception):
    """Base class for all mapping-loader failures."""

    exit_code = 1


class MultipleGlobalConfigError(MappingLoaderError):
    """More than one mapping unit declares a global configuration."""

    exit_code = 2


class DuplicateMappingError(MappingLoaderError):
    """Two class mappings in one batch share the same identity key."""


class InvalidMappingError(MappingLoaderError):
    """A mapping definition is malformed."""


class UnknownTypeError(MappingLoaderError):
    """A type name was not found in the type registry."""
