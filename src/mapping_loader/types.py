"""Shared type aliases for mapping definitions."""

from __future__ import annotations

from typing import Literal, TypeAlias

TypeName: TypeAlias = str
MapId: TypeAlias = str | None
MappingKey: TypeAlias = tuple[TypeName, TypeName, MapId]
MappingDirection: TypeAlias = Literal["bidirectional", "one-way"]
RelationshipType: TypeAlias = Literal["cumulative", "non-cumulative"]
