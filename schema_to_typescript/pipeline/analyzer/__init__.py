"""
Analyzer module.

Resolves cross-entity references and classifies fields into the IR.
"""

from __future__ import annotations

from .field_classifier import FieldClassifier, type_text
from .ir_nodes import CompilationOutput, DeclarationDef, FieldDef, ImportDef, OutputFile
from .reference_resolver import ReferenceResolver, schema_file_name

__all__ = [
    "FieldClassifier",
    "type_text",
    "ReferenceResolver",
    "schema_file_name",
    "CompilationOutput",
    "DeclarationDef",
    "FieldDef",
    "ImportDef",
    "OutputFile",
]
