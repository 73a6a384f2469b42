"""
Pipeline - schema entities to TypeScript declarations.

This module compiles a universe of schema entities in phases:

1. Phase 1 (Loader): Load the parser's JSON model into schema nodes
2. Phase 2 (Analyzer): Resolve references and classify fields into IR
3. Phase 3 (Backend): Render each entity as a class or an interface
4. Phase 4 (Writer): Optionally write the files atomically
"""

from __future__ import annotations

from .analyzer import CompilationOutput, OutputFile
from .config import CompilerConfig, DeclarationMode, OutputConfig, OutputMode
from .errors import (
    DuplicateSchemaError,
    OutputWriteError,
    SchemaCompileError,
    SchemaModelError,
    UnresolvedSchemaError,
    UnresolvedTableError,
    UnsupportedFieldTypeError,
)
from .generator import SchemaCompiler, compile_schemas
from .writer import AtomicWriter

__all__ = [
    "SchemaCompiler",
    "compile_schemas",
    "CompilationOutput",
    "OutputFile",
    "CompilerConfig",
    "DeclarationMode",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "SchemaCompileError",
    "UnresolvedSchemaError",
    "UnresolvedTableError",
    "DuplicateSchemaError",
    "SchemaModelError",
    "UnsupportedFieldTypeError",
    "OutputWriteError",
]
