"""Schema to TypeScript Generator

A Python package for compiling schema entities into TypeScript
declarations: classes validated with class-validator and
class-transformer, or plain structural interfaces.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CompilationOutput,
    CompilerConfig,
    DeclarationMode,
    OutputConfig,
    OutputMode,
    SchemaCompileError,
    SchemaCompiler,
    compile_schemas,
)

__all__ = [
    "SchemaCompiler",
    "compile_schemas",
    "CompilationOutput",
    "CompilerConfig",
    "DeclarationMode",
    "OutputConfig",
    "OutputMode",
    "SchemaCompileError",
    "AtomicWriter",
]
