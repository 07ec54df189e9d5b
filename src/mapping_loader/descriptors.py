"""Explicit type descriptors used instead of runtime reflection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mapping_loader.errors import InvalidMappingError, UnknownTypeError
from mapping_loader.types import TypeName


@dataclass(frozen=True)
class TypeDescriptor:
    """Registered shape of a mappable type.

    Parameters
    ----------
    name : str
        Type identity, usually a dotted import path.
    fields : tuple[str, ...]
        Field names in declaration order.
    """

    name: TypeName
    fields: tuple[str, ...] = ()

    def find_field(self, field_name: str, case_insensitive: bool = False) -> str | None:
        """Return the declared spelling of ``field_name`` if the type has it."""
        if not case_insensitive:
            return field_name if field_name in self.fields else None
        lowered = field_name.lower()
        for candidate in self.fields:
            if candidate.lower() == lowered:
                return candidate
        return None


class TypeRegistry:
    """Registry of type descriptors keyed by type name."""

    def __init__(self, descriptors: Iterable[TypeDescriptor] | None = None) -> None:
        self._descriptors: dict[TypeName, TypeDescriptor] = {}
        for descriptor in descriptors or []:
            self.add(descriptor)

    def add(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        """Register ``descriptor``, replacing any previous one of that name.

        Returns
        -------
        TypeDescriptor
            The stored descriptor, carrying the normalised name.

        Raises
        ------
        InvalidMappingError
            If the descriptor name is blank.
        """
        name = descriptor.name.strip()
        if not name:
            raise InvalidMappingError("Type descriptor must define a non-empty 'name'.")
        stored = TypeDescriptor(name=name, fields=descriptor.fields)
        self._descriptors[name] = stored
        return stored

    def register(self, name: TypeName, fields: Iterable[str]) -> TypeDescriptor:
        """Register a type by name and field list.

        Parameters
        ----------
        name : str
            Type identity.
        fields : Iterable[str]
            Field names of the type.

        Returns
        -------
        TypeDescriptor
            The registered descriptor.
        """
        return self.add(TypeDescriptor(name=name, fields=tuple(fields)))

    def names(self) -> list[TypeName]:
        """Return registered type names, sorted."""
        return sorted(self._descriptors)

    def get(self, name: TypeName) -> TypeDescriptor:
        """Get descriptor by type name.

        Raises
        ------
        UnknownTypeError
            If ``name`` is not registered.
        """
        try:
            return self._descriptors[name]
        except KeyError as exc:
            raise UnknownTypeError(
                f"Unknown type '{name}'. Registered types: {', '.join(self.names())}"
            ) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors
