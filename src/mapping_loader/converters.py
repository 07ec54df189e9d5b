"""Custom converter protocol and the built-in reference pass-through converter."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CustomConverter(Protocol):
    """Protocol implemented by custom value converters."""

    def convert(
        self,
        existing_destination_value: Any,
        source_value: Any,
        destination_type: type | None,
        source_type: type | None,
    ) -> Any:
        """Convert ``source_value`` into a value of ``destination_type``.

        Parameters
        ----------
        existing_destination_value : Any
            Current value of the destination field, if any.
        source_value : Any
            Value read from the source field.
        destination_type : type | None
            Declared destination field type.
        source_type : type | None
            Declared source field type.

        Returns
        -------
        Any
            Value to assign to the destination field.
        """


class ByReferenceConverter:
    """Return the source value as is, so the type pair is copied by reference."""

    def convert(
        self,
        existing_destination_value: Any,
        source_value: Any,
        destination_type: type | None,
        source_type: type | None,
    ) -> Any:
        del existing_destination_value, destination_type, source_type
        return source_value


def qualified_name(obj: type) -> str:
    """Return the dotted import path of a class.

    Parameters
    ----------
    obj : type
        Class to describe.

    Returns
    -------
    str
        ``module.QualifiedName`` string used as converter/type identity.
    """
    return f"{obj.__module__}.{obj.__qualname__}"
