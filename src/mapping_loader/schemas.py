"""Pydantic schemas for mapping units, class mappings and global configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mapping_loader.types import (
    MapId,
    MappingDirection,
    RelationshipType,
    TypeName,
)


class ConverterDescription(BaseModel):
    """Declaration of a custom converter between two types.

    Instances are frozen and hashable so that equality is structural over
    ``(class_a, class_b, converter_type)``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    class_a: TypeName
    class_b: TypeName
    converter_type: str


class CustomConverterContainer(BaseModel):
    """Ordered collection of converter declarations."""

    model_config = ConfigDict(extra="forbid")

    converters: list[ConverterDescription] | None = Field(default_factory=list)

    def find_converter(
        self, class_a: TypeName, class_b: TypeName
    ) -> ConverterDescription | None:
        """Return the first converter declared for the exact ordered pair.

        Parameters
        ----------
        class_a : str
            Source type name.
        class_b : str
            Destination type name.

        Returns
        -------
        ConverterDescription | None
            Matching declaration, or ``None`` when the pair is not covered.
        """
        for description in self.converters or []:
            if description.class_a == class_a and description.class_b == class_b:
                return description
        return None

    def add_converter(self, description: ConverterDescription) -> None:
        """Append a converter declaration."""
        if self.converters is None:
            self.converters = []
        self.converters.append(description)


class GlobalConfig(BaseModel):
    """Process-wide defaults shared by every class mapping of one load."""

    model_config = ConfigDict(extra="forbid")

    wildcard: bool = True
    wildcard_case_insensitive: bool = False
    stop_on_errors: bool = True
    date_format: str | None = None
    trim_strings: bool = False
    map_null: bool = True
    map_empty_string: bool = True
    relationship_type: RelationshipType = "cumulative"
    bean_factory: str | None = None
    custom_converters: CustomConverterContainer | None = None
    copy_by_references: list[TypeName] | None = None
    allowed_exceptions: list[str] = Field(default_factory=list)


class FieldMapping(BaseModel):
    """Rule copying source field ``a`` into destination field ``b``."""

    model_config = ConfigDict(extra="forbid")

    a: str
    b: str
    direction: MappingDirection = "bidirectional"
    field_type: TypeName | None = None
    copy_by_reference: bool | None = None
    custom_converter: str | None = None
    excluded: bool = False
    generated: bool = False

    @field_validator("a", "b")
    @classmethod
    def _strip_field_name(cls, value: str) -> str:
        return value.strip()


class ClassMapping(BaseModel):
    """Rules describing how instances of ``class_a`` map onto ``class_b``.

    Per-mapping flags left as ``None`` inherit the value of the global
    configuration when the mapping is processed.
    """

    model_config = ConfigDict(extra="forbid")

    class_a: TypeName = Field(min_length=1)
    class_b: TypeName = Field(min_length=1)
    map_id: MapId = None
    direction: MappingDirection = "bidirectional"
    wildcard: bool | None = None
    wildcard_case_insensitive: bool | None = None
    stop_on_errors: bool | None = None
    map_null: bool | None = None
    map_empty_string: bool | None = None
    trim_strings: bool | None = None
    date_format: str | None = None
    relationship_type: RelationshipType | None = None
    field_mappings: list[FieldMapping] = Field(default_factory=list)
    custom_converters: CustomConverterContainer | None = None

    @property
    def key(self) -> tuple[TypeName, TypeName, MapId]:
        """Identity key of this mapping."""
        return (self.class_a, self.class_b, self.map_id)

    def is_wildcard(self, configuration: GlobalConfig) -> bool:
        """Return the effective wildcard policy for this mapping."""
        if self.wildcard is None:
            return configuration.wildcard
        return self.wildcard

    def is_wildcard_case_insensitive(self, configuration: GlobalConfig) -> bool:
        """Return the effective case sensitivity of wildcard matching."""
        if self.wildcard_case_insensitive is None:
            return configuration.wildcard_case_insensitive
        return self.wildcard_case_insensitive


class MappingUnit(BaseModel):
    """One parsed mapping source: an optional configuration plus class mappings."""

    model_config = ConfigDict(extra="forbid")

    source: str | None = None
    configuration: GlobalConfig | None = None
    class_mappings: list[ClassMapping] = Field(default_factory=list)
