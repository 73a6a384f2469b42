"""
Interface backend.

Generates plain TypeScript interfaces describing the structural shape only.
"""

from __future__ import annotations

from ...directive_generator import DirectiveGenerator, NoDirectiveGenerator
from ..analyzer.ir_nodes import FieldDef
from .base import CodeBackend


class InterfaceBackend(CodeBackend):
    """Plain interface backend."""

    TEMPLATE_NAME = "interface"

    def create_directive_generator(self) -> DirectiveGenerator:
        return NoDirectiveGenerator()

    def member_declaration(self, field: FieldDef) -> str:
        sigil = "" if field.is_required else "?"
        return f"{field.key}{sigil}: {field.type_text}"
