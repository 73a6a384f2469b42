"""
Schema compiler driver.

Compiles a closed universe of schema entities:

1. Check entity names are unique
2. Resolve schema and table references into imports
3. Classify fields with the backend's directive generator
4. Render each entity and aggregate the files and the name -> path map

Every entity is rendered before anything is returned, so a resolution
failure leaves no partial output.
"""

from __future__ import annotations

import logging

from .analyzer.ir_nodes import CompilationOutput, OutputFile
from .analyzer.reference_resolver import ReferenceResolver, schema_file_name
from .backends import BACKENDS, CodeBackend
from .config import CompilerConfig, DeclarationMode
from .errors import DuplicateSchemaError
from .schema_ast.nodes import Schema

logger = logging.getLogger(__name__)


class SchemaCompiler:
    """Compiles schema entities into TypeScript declaration files."""

    def __init__(self, config: CompilerConfig | None = None):
        self.config = config or CompilerConfig()
        self.mode = DeclarationMode(self.config.mode)
        self.backend: CodeBackend = BACKENDS[self.mode](self.config)

    def compile(self, schemas: list[Schema], table_paths: dict[str, str]) -> CompilationOutput:
        """
        Compile every schema.

        Args:
            schemas: The schema universe, in output order
            table_paths: Mapping from table name to its logical path

        Returns:
            CompilationOutput with one file per schema and the name -> path map

        Raises:
            DuplicateSchemaError: If two schemas share a name (unless allowed)
            UnresolvedSchemaError: If a schema reference cannot be resolved
            UnresolvedTableError: If a table reference cannot be resolved
        """
        if not self.config.allow_duplicate_names:
            self._check_unique_names(schemas)

        resolver = ReferenceResolver(schemas, table_paths, self.config.output_subdirectory)

        output = CompilationOutput()
        for schema in schemas:
            output_file, path = self.compile_schema(schema, resolver)
            output.files.append(output_file)
            output.map[schema.name] = path

        logger.debug("Compiled %d schemas in %s mode", len(output.files), self.mode.value)
        return output

    def compile_schema(self, schema: Schema, resolver: ReferenceResolver) -> tuple[OutputFile, str]:
        """Compile one schema into its file and logical path."""
        imports = resolver.resolve(schema)
        declaration = self.backend.build(schema, imports)

        subdirectory = self.config.output_subdirectory
        filename = schema_file_name(schema.name, subdirectory, self.config.file_extension)
        logger.debug("Rendering %s -> %s", schema.name, filename)

        return (
            OutputFile(filename=filename, content=self.backend.render(declaration)),
            schema_file_name(schema.name, subdirectory),
        )

    def _check_unique_names(self, schemas: list[Schema]) -> None:
        seen: set[str] = set()
        for schema in schemas:
            if schema.name in seen:
                raise DuplicateSchemaError(schema.name)
            seen.add(schema.name)


def compile_schemas(
    schemas: list[Schema],
    table_paths: dict[str, str],
    mode: DeclarationMode | str = DeclarationMode.CLASS,
) -> CompilationOutput:
    """Compile schemas with the default configuration for a declaration mode."""
    config = CompilerConfig(mode=DeclarationMode(mode))
    return SchemaCompiler(config).compile(schemas, table_paths)
