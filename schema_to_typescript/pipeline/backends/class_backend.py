"""
Class backend.

Generates TypeScript classes decorated with class-validator and
class-transformer directives.
"""

from __future__ import annotations

from ...directive_generator import DirectiveGenerator
from ..analyzer.ir_nodes import FieldDef
from .base import CodeBackend


class ClassBackend(CodeBackend):
    """Validated class backend."""

    TEMPLATE_NAME = "class"

    def create_directive_generator(self) -> DirectiveGenerator:
        return DirectiveGenerator()

    def member_declaration(self, field: FieldDef) -> str:
        # "!" marks definite assignment
        sigil = "!" if field.is_required else "?"
        return f"{field.key}{sigil}: {field.type_text}"
