"""
IR (Intermediate Representation) node definitions.

These nodes represent a schema entity after reference resolution and
field classification, ready to be rendered by a backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImportDef:
    """An import of one referenced schema or table."""

    name: str = ""  # Imported declaration name
    path: str = ""  # Logical path of the declaring file (no extension)

    def render(self) -> str:
        # The leading "." makes the logical path relative to the schema subdirectory
        return f"import {{ {self.name} }} from '.{self.path}'"


@dataclass
class FieldDef:
    """A classified field."""

    key: str = ""
    type_text: str = ""  # e.g. "number[]", "Role"
    is_required: bool = False

    # Directive lines placed above the member (class mode only)
    directives: list[str] = field(default_factory=list)


@dataclass
class DeclarationDef:
    """A schema entity ready for rendering."""

    name: str = ""
    imports: list[ImportDef] = field(default_factory=list)
    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class OutputFile:
    """One generated file."""

    filename: str = ""
    content: str = ""


@dataclass
class CompilationOutput:
    """Result of compiling a whole schema universe."""

    files: list[OutputFile] = field(default_factory=list)

    # Entity name -> logical output path (no extension)
    map: dict[str, str] = field(default_factory=dict)
