"""
Base class for declaration backends.

A backend renders one schema entity into a complete output unit: import
lines, then the declaration with its members. Backends only differ in the
injected directive generator, the member syntax and the template.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ...directive_generator import DirectiveGenerator
from ..analyzer.field_classifier import FieldClassifier
from ..analyzer.ir_nodes import DeclarationDef, FieldDef, ImportDef
from ..config import CompilerConfig
from ..schema_ast.nodes import Schema


class CodeBackend(ABC):
    """Abstract base class for declaration backends."""

    # Template directory name
    TEMPLATE_LANG: str = "typescript"

    # Template file stem (e.g. "class" -> class.ts.jinja2)
    TEMPLATE_NAME: str = ""

    def __init__(self, config: CompilerConfig):
        """
        Initialize the backend.

        Args:
            config: Compiler configuration
        """
        self.config = config
        self.classifier = FieldClassifier(self.create_directive_generator())
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.declaration_template = self.jinja_env.get_template(f"{self.TEMPLATE_NAME}.ts.jinja2")

    @abstractmethod
    def create_directive_generator(self) -> DirectiveGenerator:
        """Directive generator injected into the field classifier."""

    @abstractmethod
    def member_declaration(self, field: FieldDef) -> str:
        """
        Render the member line of a field.

        Args:
            field: The classified field

        Returns:
            Member declaration, e.g. ``id!: number``
        """

    def build(self, schema: Schema, imports: list[ImportDef]) -> DeclarationDef:
        """Classify every field of a schema, keeping field order."""
        return DeclarationDef(
            name=schema.name,
            imports=imports,
            fields=[self.classifier.classify(item) for item in schema.items],
        )

    def render(self, declaration: DeclarationDef) -> str:
        """Render a declaration to source text."""
        return self.declaration_template.render(self._prepare_context(declaration))

    def _prepare_context(self, declaration: DeclarationDef) -> dict[str, Any]:
        return {
            "CLASS_NAME": declaration.name,
            "imports": [imp.render() for imp in declaration.imports],
            "indent": self.config.indent,
            "fields": [
                {
                    "directives": field.directives,
                    "declaration": self.member_declaration(field),
                }
                for field in declaration.fields
            ],
        }
