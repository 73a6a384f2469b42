"""
Configuration for the schema compiler and the file writer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeclarationMode(str, Enum):
    """Shape of the generated declarations."""

    CLASS = "class"  # Validated class with class-validator decorators
    INTERFACE = "interface"  # Plain structural interface


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CompilerConfig:
    """Configuration options for schema compilation."""

    # Declaration shape (validated class or plain interface)
    mode: DeclarationMode = DeclarationMode.CLASS

    # Logical subdirectory every schema file is placed under
    output_subdirectory: str = "ts-schema"

    # Extension appended to file names (not to the map paths)
    file_extension: str = ".ts"

    # Member indentation inside declarations
    indent: str = "  "

    # Keep the last entity on duplicate names instead of failing
    allow_duplicate_names: bool = False

    @staticmethod
    def from_dict(d: dict) -> CompilerConfig:
        """Create a config from a dictionary."""
        config = CompilerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.mode = DeclarationMode(config.mode)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "mode": self.mode.value,
            "output_subdirectory": self.output_subdirectory,
            "file_extension": self.file_extension,
            "indent": self.indent,
            "allow_duplicate_names": self.allow_duplicate_names,
        }
