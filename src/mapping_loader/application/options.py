"""Typed option objects for the load use-case."""

from __future__ import annotations

from dataclasses import dataclass

from mapping_loader.types import TypeName

DEFAULT_PASS_THROUGH_TYPE: TypeName = "uuid.UUID"


@dataclass(frozen=True)
class LoadOptions:
    """Options controlling a single load call.

    Parameters
    ----------
    pass_through_type : str, default="uuid.UUID"
        Type copied by reference through the injected default converter.
    """

    pass_through_type: TypeName = DEFAULT_PASS_THROUGH_TYPE
