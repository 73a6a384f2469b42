"""
Loader turning the parser's JSON model into schema nodes.

The parser emits schemas as plain dictionaries::

    {"name": "User", "items": [{"key": "id", "required": true, "array": false,
                               "type": {"type": "native", "native_type": "number"}}]}
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaModelError
from .nodes import EnumType, FieldType, Item, NativeKind, NativeType, Schema, SchemaType, TableType

# type tag -> (node class, name key)
_REFERENCE_TYPES: dict[str, tuple[type, str]] = {
    "enum": (EnumType, "enum_name"),
    "schema": (SchemaType, "schema_name"),
    "table": (TableType, "table_name"),
}


def load_schemas(data: list[dict[str, Any]]) -> list[Schema]:
    """Load a list of schema dictionaries, keeping their order."""
    if not isinstance(data, list):
        raise SchemaModelError(f"Expected a list of schemas, got {type(data).__name__}")
    return [load_schema(d) for d in data]


def load_schema(data: dict[str, Any]) -> Schema:
    """Load a single schema dictionary."""
    if not isinstance(data, dict) or "name" not in data:
        raise SchemaModelError(f"Schema entry must be an object with a name: {data!r}")

    name = data["name"]
    items = data.get("items", [])
    if not isinstance(items, list):
        raise SchemaModelError(f"Schema {name}: items must be a list")

    return Schema(name=name, items=tuple(_load_item(name, item) for item in items))


def load_document(data: Any) -> tuple[list[Schema], dict[str, str]]:
    """
    Load a model document.

    Accepts either a bare list of schemas or an object with a ``schemas``
    list and an optional ``tables`` name -> path lookup.

    Returns:
        Tuple of (schemas, table lookup)
    """
    if isinstance(data, list):
        return load_schemas(data), {}

    if not isinstance(data, dict) or "schemas" not in data:
        raise SchemaModelError('Model document must be a list of schemas or an object with a "schemas" key')

    tables = data.get("tables", {})
    if not isinstance(tables, dict):
        raise SchemaModelError('"tables" must map table names to paths')

    return load_schemas(data["schemas"]), dict(tables)


def _load_item(schema_name: str, data: dict[str, Any]) -> Item:
    if not isinstance(data, dict) or "key" not in data:
        raise SchemaModelError(f"Schema {schema_name}: field entry must be an object with a key: {data!r}")

    key = data["key"]
    if "type" not in data:
        raise SchemaModelError(f"Schema {schema_name}: field {key} has no type")

    return Item(
        key=key,
        type=_load_type(schema_name, key, data["type"]),
        required=bool(data.get("required", False)),
        array=bool(data.get("array", False)),
    )


def _load_type(schema_name: str, key: str, data: dict[str, Any]) -> FieldType:
    where = f"{schema_name}.{key}"
    if not isinstance(data, dict):
        raise SchemaModelError(f"{where}: type must be an object, got {data!r}")

    tag = data.get("type")

    if tag == "native":
        try:
            return NativeType(native_type=NativeKind(data.get("native_type")))
        except ValueError:
            raise SchemaModelError(f"{where}: unknown native type {data.get('native_type')!r}") from None

    if tag in _REFERENCE_TYPES:
        node_class, name_key = _REFERENCE_TYPES[tag]
        if not data.get(name_key):
            raise SchemaModelError(f"{where}: {tag} type is missing {name_key}")
        return node_class(data[name_key])

    raise SchemaModelError(f"{where}: unknown type tag {tag!r}")
