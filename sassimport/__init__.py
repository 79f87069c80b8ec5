# sassimport/__init__.py
"""Resolves stylesheet @import directives against a multi-root asset tree."""

__version__ = "0.1.0"

from sassimport.core.importer import Importer
from sassimport.core.models import ImportRequest, ImportResult, ResolvedFile

__all__ = ["Importer", "ImportRequest", "ImportResult", "ResolvedFile", "__version__"]
