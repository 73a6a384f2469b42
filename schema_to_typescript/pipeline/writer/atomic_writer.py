"""
Atomic file writer for generated declarations.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..analyzer.ir_nodes import CompilationOutput
from ..config import OutputConfig, OutputMode
from ..errors import OutputWriteError

logger = logging.getLogger(__name__)

_DECLARATION = re.compile(r"^export (class|interface) \w+ \{$", re.MULTILINE)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_typescript: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_typescript: Optional validation function for generated code
        """
        self._validate_typescript = validate_typescript or self._default_validate_typescript

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_typescript(content)

            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_output(self, output: CompilationOutput, out_folder: Path, config: OutputConfig | None = None) -> list[Path]:
        """Write every file of a compilation under an output folder.

        Existing targets and file contents are checked before anything is
        written, so a conflict or an invalid file leaves the folder untouched.

        Returns:
            The written paths, in compilation order
        """
        config = config or OutputConfig()
        targets = [(out_folder / f.filename, f.content) for f in output.files]

        if config.mode == OutputMode.ERROR_IF_EXISTS:
            for path, _ in targets:
                if path.exists():
                    raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if config.validate_before_write:
            for _, content in targets:
                self._validate_typescript(content)

        written = []
        for path, content in targets:
            if config.atomic_write:
                self.write(path, content, validate=False)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", path)
            written.append(path)
        return written

    def _default_validate_typescript(self, content: str) -> None:
        """Default structural validation.

        Raises:
            OutputWriteError: If validation fails
        """
        if not _DECLARATION.search(content):
            raise OutputWriteError("Generated code has no class or interface declaration")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise OutputWriteError(f"Generated code has unbalanced braces: {open_braces} open, {close_braces} close")
