"""Default mapping processor: per-unit decoration of raw class mappings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mapping_loader.errors import DuplicateMappingError, InvalidMappingError
from mapping_loader.mappings import ClassMappings, mapping_key
from mapping_loader.schemas import ClassMapping, FieldMapping, GlobalConfig

logger = logging.getLogger(__name__)

_INHERITED_FLAGS = (
    "wildcard",
    "wildcard_case_insensitive",
    "stop_on_errors",
    "map_null",
    "map_empty_string",
    "trim_strings",
    "date_format",
    "relationship_type",
)


class DefaultMappingProcessor:
    """Decorate raw class mappings and synthesise reverse mappings.

    Notes
    -----
    Raw mappings are copied before decoration; the input sequence is never
    modified.
    """

    def process_mappings(
        self,
        class_mappings: Sequence[ClassMapping],
        configuration: GlobalConfig,
    ) -> ClassMappings:
        """Return decorated mappings plus reverse mappings for bidirectional ones.

        Parameters
        ----------
        class_mappings : Sequence[ClassMapping]
            Raw mappings of one unit.
        configuration : GlobalConfig
            Resolved global configuration.

        Returns
        -------
        ClassMappings
            Processed mappings keyed by identity.

        Raises
        ------
        DuplicateMappingError
            If two mappings in ``class_mappings`` share a key.
        InvalidMappingError
            If a field mapping has an empty source or destination field.
        """
        processed = ClassMappings()
        for raw in class_mappings:
            mapping = raw.model_copy(deep=True)
            key = mapping_key(*mapping.key)
            if key in processed:
                raise DuplicateMappingError(
                    "Duplicate class mapping found. "
                    f"Source: {mapping.class_a} Destination: {mapping.class_b} "
                    f"map-id: {mapping.map_id}"
                )
            _inherit_global_flags(mapping, configuration)
            for field_mapping in mapping.field_mappings:
                _process_field_mapping(mapping, field_mapping, configuration)
            processed.add(mapping)

        for mapping in processed.values():
            if mapping.direction == "one-way":
                continue
            if processed.find(mapping.class_b, mapping.class_a, mapping.map_id) is not None:
                continue
            processed.add(_reverse(mapping))
            logger.debug(
                "synthesised reverse mapping %s -> %s", mapping.class_b, mapping.class_a
            )
        return processed


def _inherit_global_flags(mapping: ClassMapping, configuration: GlobalConfig) -> None:
    for name in _INHERITED_FLAGS:
        if getattr(mapping, name) is None:
            setattr(mapping, name, getattr(configuration, name))


def _process_field_mapping(
    mapping: ClassMapping,
    field_mapping: FieldMapping,
    configuration: GlobalConfig,
) -> None:
    if not field_mapping.a or not field_mapping.b:
        raise InvalidMappingError(
            f"Field mapping of {mapping.class_a} -> {mapping.class_b} must name "
            f"both fields (got a={field_mapping.a!r}, b={field_mapping.b!r})."
        )
    if field_mapping.copy_by_reference is None:
        by_reference = configuration.copy_by_references or []
        field_mapping.copy_by_reference = field_mapping.field_type in by_reference


def _reverse(mapping: ClassMapping) -> ClassMapping:
    field_mappings = [
        field_mapping.model_copy(update={"a": field_mapping.b, "b": field_mapping.a})
        for field_mapping in mapping.field_mappings
        if field_mapping.direction == "bidirectional"
    ]
    return mapping.model_copy(
        update={
            "class_a": mapping.class_b,
            "class_b": mapping.class_a,
            "field_mappings": field_mappings,
        },
        deep=True,
    )
