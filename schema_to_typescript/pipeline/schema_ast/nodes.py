"""
Schema model node definitions.

These nodes represent the schema entities produced by the upstream parser:
named record types whose fields reference primitive types, enumerations,
other schemas or externally compiled tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NativeKind(str, Enum):
    """Primitive kinds a native field can carry."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True)
class NativeType:
    """A primitive type, needs no cross-entity resolution."""

    native_type: NativeKind = NativeKind.STRING


@dataclass(frozen=True)
class EnumType:
    """Reference to an enumeration by its resolved name."""

    enum_name: str = ""


@dataclass(frozen=True)
class SchemaType:
    """Reference to another schema entity of the same universe."""

    schema_name: str = ""


@dataclass(frozen=True)
class TableType:
    """Reference to a table compiled by the model compiler."""

    table_name: str = ""


# Closed set of field types; every consumer handles all four variants.
FieldType = NativeType | EnumType | SchemaType | TableType


@dataclass(frozen=True)
class Item:
    """A field of a schema entity."""

    key: str = ""
    type: FieldType = field(default_factory=NativeType)
    required: bool = False
    array: bool = False


@dataclass(frozen=True)
class Schema:
    """A named record type to be compiled into a declaration."""

    name: str = ""
    items: tuple[Item, ...] = ()

    @property
    def references(self) -> list[Item]:
        """Fields that point at another schema or a table."""
        return [item for item in self.items if isinstance(item.type, (SchemaType, TableType))]
