"""Default field-mapping builder driven by each mapping's wildcard policy."""

from __future__ import annotations

import logging

from mapping_loader.descriptors import TypeRegistry
from mapping_loader.mappings import ClassMappings
from mapping_loader.schemas import ClassMapping, FieldMapping, GlobalConfig

logger = logging.getLogger(__name__)


class WildcardFieldMappingBuilder:
    """Add same-name field mappings to wildcard-enabled class mappings.

    Parameters
    ----------
    registry : TypeRegistry | None, optional
        Registered type shapes. Defaults to an empty registry.
    strict : bool, default=False
        Raise :class:`~mapping_loader.errors.UnknownTypeError` for types missing
        from the registry instead of skipping the mapping.
    """

    def __init__(self, registry: TypeRegistry | None = None, strict: bool = False) -> None:
        self.registry = registry or TypeRegistry()
        self.strict = strict

    def add_default_field_mappings(
        self,
        mappings: ClassMappings,
        configuration: GlobalConfig,
    ) -> None:
        """Append default field mappings in place.

        Mappings whose wildcard policy is disabled are left untouched, so the
        call is safe to repeat.
        """
        for mapping in mappings:
            if not mapping.is_wildcard(configuration):
                continue
            self._add_defaults(mapping, configuration)

    def _add_defaults(self, mapping: ClassMapping, configuration: GlobalConfig) -> None:
        if not self.strict and (
            mapping.class_a not in self.registry or mapping.class_b not in self.registry
        ):
            logger.debug(
                "skipping wildcard fields for unregistered %s -> %s",
                mapping.class_a,
                mapping.class_b,
            )
            return
        source = self.registry.get(mapping.class_a)
        destination = self.registry.get(mapping.class_b)
        case_insensitive = mapping.is_wildcard_case_insensitive(configuration)

        def _norm(name: str) -> str:
            return name.lower() if case_insensitive else name

        claimed = {_norm(field_mapping.b) for field_mapping in mapping.field_mappings}
        for field_name in destination.fields:
            if _norm(field_name) in claimed:
                continue
            source_name = source.find_field(field_name, case_insensitive=case_insensitive)
            if source_name is None:
                continue
            mapping.field_mappings.append(
                FieldMapping(a=source_name, b=field_name, generated=True)
            )
            claimed.add(_norm(field_name))
