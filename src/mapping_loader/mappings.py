"""Consolidated class-mapping table keyed by mapping identity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mapping_loader.schemas import ClassMapping
from mapping_loader.types import MapId, MappingKey, TypeName


def mapping_key(class_a: TypeName, class_b: TypeName, map_id: MapId = None) -> MappingKey:
    """Build the identity key of a class mapping.

    Parameters
    ----------
    class_a : str
        Source type name.
    class_b : str
        Destination type name.
    map_id : str | None, optional
        Optional named variant of the mapping.

    Returns
    -------
    tuple[str, str, str | None]
        Key used by :class:`ClassMappings`.
    """
    return (class_a, class_b, map_id or None)


class ClassMappings:
    """Insertion-ordered table of class mappings.

    Adding a mapping under an existing key replaces the previous entry in
    place, keeping its original position.
    """

    def __init__(self, mappings: Iterable[ClassMapping] | None = None) -> None:
        self._mappings: dict[MappingKey, ClassMapping] = {}
        for mapping in mappings or []:
            self.add(mapping)

    def add(self, mapping: ClassMapping) -> None:
        """Insert ``mapping`` under its identity key."""
        self._mappings[mapping_key(*mapping.key)] = mapping

    def add_all(self, other: ClassMappings) -> None:
        """Merge every entry of ``other`` into this table, in its order."""
        for key, mapping in other.items():
            self._mappings[key] = mapping

    def find(
        self, class_a: TypeName, class_b: TypeName, map_id: MapId = None
    ) -> ClassMapping | None:
        """Return the mapping for the given key, or ``None``."""
        return self._mappings.get(mapping_key(class_a, class_b, map_id))

    def get(self, key: MappingKey) -> ClassMapping:
        """Return the mapping for ``key``.

        Raises
        ------
        KeyError
            If no mapping is registered under ``key``.
        """
        return self._mappings[key]

    def keys(self) -> list[MappingKey]:
        return list(self._mappings)

    def values(self) -> list[ClassMapping]:
        return list(self._mappings.values())

    def items(self) -> list[tuple[MappingKey, ClassMapping]]:
        return list(self._mappings.items())

    def __contains__(self, key: object) -> bool:
        return key in self._mappings

    def __iter__(self) -> Iterator[ClassMapping]:
        return iter(self._mappings.values())

    def __len__(self) -> int:
        return len(self._mappings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassMappings):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"ClassMappings({self.keys()!r})"
