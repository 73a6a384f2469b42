"""
Schema model module.

Contains the schema entity node definitions and the loader for the
parser's JSON representation.
"""

from __future__ import annotations

from .loader import load_document, load_schema, load_schemas
from .nodes import EnumType, FieldType, Item, NativeKind, NativeType, Schema, SchemaType, TableType

__all__ = [
    "Schema",
    "Item",
    "FieldType",
    "NativeKind",
    "NativeType",
    "EnumType",
    "SchemaType",
    "TableType",
    "load_schema",
    "load_schemas",
    "load_document",
]
