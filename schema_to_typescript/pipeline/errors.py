"""
Errors raised while loading, compiling and writing schemas.
"""

from __future__ import annotations


class SchemaCompileError(Exception):
    """Base class for every failure of the schema compiler."""


class UnresolvedReferenceError(SchemaCompileError):
    """A field references an entity that cannot be resolved."""

    kind = "Reference"
    suffix = ""

    def __init__(self, entity: str, field: str, missing_name: str):
        self.entity = entity
        self.field = field
        self.missing_name = missing_name
        super().__init__(f'{self.kind} "{missing_name}" is not available{self.suffix} (referenced by {entity}.{field})')


class UnresolvedSchemaError(UnresolvedReferenceError):
    """A schema-typed field names a schema absent from the universe."""

    kind = "Schema"


class UnresolvedTableError(UnresolvedReferenceError):
    """A table-typed field names a table absent from the model lookup."""

    kind = "Table"
    suffix = " on models"


class DuplicateSchemaError(SchemaCompileError):
    """Two schema entities share the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Schema "{name}" is defined more than once')


class SchemaModelError(SchemaCompileError):
    """The schema model does not follow the parser contract."""


class UnsupportedFieldTypeError(SchemaCompileError):
    """A field carries a type variant the compiler does not know."""


class OutputWriteError(SchemaCompileError):
    """Generated content failed validation before being written."""
