"""
Directive generator for schema fields.

This module builds the class-validator / class-transformer decorators of a
field from its type, cardinality and requiredness using directive rule
objects.
"""

from typing import List, assert_never

from .directive_rules import (
    DirectiveRule,
    IsArrayDirective,
    IsBooleanDirective,
    IsEnumDirective,
    IsNumberDirective,
    IsObjectDirective,
    IsStringDirective,
    NotEmptyDirective,
    OptionalDirective,
    TransformDirective,
    TypeDirective,
    ValidateNestedDirective,
)
from .pipeline.schema_ast.nodes import EnumType, Item, NativeKind, NativeType, SchemaType, TableType
from .transforms import get_transform


class DirectiveGenerator:
    """Generate the decorators of a field using rule objects"""

    def generate_field_directives(self, item: Item) -> List[str]:
        """
        Generate the decorator lines for a single field.

        The requiredness directive always comes first.
        """
        code_lines = []
        for rule in self.create_rules(item):
            code_lines.extend(rule.generate_code())
        return code_lines

    def create_rules(self, item: Item) -> List[DirectiveRule]:
        rules: List[DirectiveRule] = []

        if item.required:
            rules.append(NotEmptyDirective(item.key))
        else:
            rules.append(OptionalDirective(item.key))

        field_type = item.type
        if isinstance(field_type, NativeType):
            rules.extend(self._create_native_rules(item, field_type.native_type))
        elif isinstance(field_type, EnumType):
            rules.append(IsEnumDirective(item.key, field_type.enum_name, item.array))
        elif isinstance(field_type, SchemaType):
            rules.extend(self._create_nested_rules(item, field_type.schema_name))
        elif isinstance(field_type, TableType):
            rules.extend(self._create_nested_rules(item, field_type.table_name))
        else:
            assert_never(field_type)

        return rules

    def _create_native_rules(self, item: Item, kind: NativeKind) -> List[DirectiveRule]:
        if kind == NativeKind.NUMBER:
            return [
                TransformDirective(item.key, get_transform(kind.value, item.array)),
                IsNumberDirective(item.key, item.array),
            ]
        if kind == NativeKind.BOOLEAN:
            return [
                TransformDirective(item.key, get_transform(kind.value, item.array)),
                IsBooleanDirective(item.key, item.array),
            ]
        if kind == NativeKind.STRING:
            # Strings pass through untouched
            return [IsStringDirective(item.key, item.array)]
        assert_never(kind)

    def _create_nested_rules(self, item: Item, type_name: str) -> List[DirectiveRule]:
        if item.array:
            rules: List[DirectiveRule] = [
                IsArrayDirective(item.key),
                ValidateNestedDirective(item.key, is_array=True),
            ]
        else:
            rules = [
                IsObjectDirective(item.key),
                ValidateNestedDirective(item.key),
            ]
        rules.append(TypeDirective(item.key, type_name))
        return rules


class NoDirectiveGenerator(DirectiveGenerator):
    """Directive generator for plain declarations: emits nothing"""

    def create_rules(self, item: Item) -> List[DirectiveRule]:
        return []
