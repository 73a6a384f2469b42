import json
import logging
from pathlib import Path

import click

from .pipeline import AtomicWriter, CompilerConfig, DeclarationMode, OutputConfig, OutputMode, SchemaCompileError, SchemaCompiler
from .pipeline.schema_ast import load_document

logger = logging.getLogger(__name__)


@click.command()
@click.option("--tables", "-t", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON file mapping table names to model paths")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--mode", "-m", default=None, type=click.Choice([m.value for m in DeclarationMode]))
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(file_okay=False, resolve_path=True))
def schema_to_typescript(tables, config, mode, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = CompilerConfig.from_dict(json.load(f))
    else:
        config = CompilerConfig()

    # CLI flag overrides the config file
    if mode is not None:
        config.mode = DeclarationMode(mode)

    try:
        schemas, table_paths = load_document(document)
        if tables is not None:
            with open(tables) as f:
                table_paths.update(json.load(f))

        compiled = SchemaCompiler(config).compile(schemas, table_paths)

        output_config = OutputConfig(mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS)
        AtomicWriter().write_output(compiled, Path(output), output_config)
    except (SchemaCompileError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    logger.info("Compiled %d schemas into %s", len(compiled.files), output)
    click.echo(json.dumps(compiled.map, indent=2))
