# sassimport/environment/__init__.py
"""
Host environment capabilities consumed by the resolution core, plus a
file-system backed implementation.
"""
from .base import AssetAttributes, Environment
from .filesystem import CompilationContext, FileSystemEnvironment
from .processors import Processor, SASS_FAMILY

__all__ = [
    "AssetAttributes",
    "CompilationContext",
    "Environment",
    "FileSystemEnvironment",
    "Processor",
    "SASS_FAMILY",
]
