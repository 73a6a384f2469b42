"""
Field classifier.

Turns a schema field into its rendered type text and, through the injected
directive generator, the decorators placed above it. The type text does not
depend on the declaration mode.
"""

from __future__ import annotations

from typing import assert_never

from ...directive_generator import DirectiveGenerator
from ..errors import UnsupportedFieldTypeError
from ..schema_ast.nodes import EnumType, FieldType, Item, NativeType, SchemaType, TableType
from .ir_nodes import FieldDef


def type_name(field_type: FieldType) -> str:
    """Name of the declared type: the primitive kind or the referenced name."""
    if isinstance(field_type, NativeType):
        return field_type.native_type.value
    if isinstance(field_type, EnumType):
        return field_type.enum_name
    if isinstance(field_type, SchemaType):
        return field_type.schema_name
    if isinstance(field_type, TableType):
        return field_type.table_name
    assert_never(field_type)


def type_text(item: Item) -> str:
    """Rendered type of a field, e.g. ``number`` or ``Role[]``."""
    return type_name(item.type) + ("[]" if item.array else "")


class FieldClassifier:
    """Classifies fields with a mode-specific directive generator."""

    def __init__(self, directive_generator: DirectiveGenerator):
        self.directive_generator = directive_generator

    def classify(self, item: Item) -> FieldDef:
        if not isinstance(item.type, (NativeType, EnumType, SchemaType, TableType)):
            raise UnsupportedFieldTypeError(f"Field {item.key} has unsupported type {item.type!r}")

        return FieldDef(
            key=item.key,
            type_text=type_text(item),
            is_required=item.required,
            directives=self.directive_generator.generate_field_directives(item),
        )
