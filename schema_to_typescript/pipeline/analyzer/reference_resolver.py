"""
Reference resolver for schema and table fields.

Maps every schema- or table-typed field of an entity to the file that
declares the referenced type and builds the matching import.
"""

from __future__ import annotations

import logging

from ..errors import UnresolvedSchemaError, UnresolvedTableError
from ..schema_ast.nodes import Schema, SchemaType, TableType
from .ir_nodes import ImportDef

logger = logging.getLogger(__name__)


def schema_file_name(schema_name: str, subdirectory: str, extension: str = "") -> str:
    """Logical path of a schema's generated file, e.g. ``./ts-schema/User``."""
    return f"./{subdirectory}/{schema_name}{extension}"


class ReferenceResolver:
    """Resolves schema and table references to imports."""

    def __init__(self, schemas: list[Schema], table_paths: dict[str, str], subdirectory: str):
        """
        Initialize the resolver.

        Args:
            schemas: Every schema entity of the compilation
            table_paths: Mapping from table name to its logical path
            subdirectory: Logical subdirectory of the generated schema files
        """
        self.table_paths = table_paths
        self.subdirectory = subdirectory
        self._schema_names = {schema.name for schema in schemas}

    def resolve(self, schema: Schema) -> list[ImportDef]:
        """
        Build the imports of a schema, one per referencing field, in field order.

        Raises:
            UnresolvedSchemaError: If a schema reference is not in the universe
            UnresolvedTableError: If a table reference is not in the lookup
        """
        imports = []
        for item in schema.references:
            if isinstance(item.type, SchemaType):
                imports.append(self._resolve_schema(schema, item.key, item.type.schema_name))
            elif isinstance(item.type, TableType):
                imports.append(self._resolve_table(schema, item.key, item.type.table_name))
        return imports

    def _resolve_schema(self, schema: Schema, key: str, schema_name: str) -> ImportDef:
        if schema_name not in self._schema_names:
            raise UnresolvedSchemaError(schema.name, key, schema_name)

        path = schema_file_name(schema_name, self.subdirectory)
        logger.debug("%s.%s -> schema %s (%s)", schema.name, key, schema_name, path)
        return ImportDef(name=schema_name, path=path)

    def _resolve_table(self, schema: Schema, key: str, table_name: str) -> ImportDef:
        path = self.table_paths.get(table_name)
        if not path:
            raise UnresolvedTableError(schema.name, key, table_name)

        logger.debug("%s.%s -> table %s (%s)", schema.name, key, table_name, path)
        return ImportDef(name=table_name, path=path)
