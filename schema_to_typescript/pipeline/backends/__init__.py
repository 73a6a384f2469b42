"""
Declaration backends, one per declaration mode.
"""

from __future__ import annotations

from ..config import DeclarationMode
from .base import CodeBackend
from .class_backend import ClassBackend
from .interface_backend import InterfaceBackend

BACKENDS: dict[DeclarationMode, type[CodeBackend]] = {
    DeclarationMode.CLASS: ClassBackend,
    DeclarationMode.INTERFACE: InterfaceBackend,
}

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "ClassBackend",
    "InterfaceBackend",
]
