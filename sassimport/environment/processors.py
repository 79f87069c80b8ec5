# sassimport/environment/processors.py
"""
Preprocessors and engines applied to an asset's text before it is handed
to the stylesheet compiler.
"""
from pathlib import Path
from typing import Any, Dict, Optional
import pybars # type: ignore
import structlog

from sassimport.exceptions import EvaluationError

log = structlog.get_logger(__name__)

# processors of this family belong to the stylesheet compiler itself.
SASS_FAMILY = "sass"

class Processor:
    """Base class for a text transformation keyed by a file extension."""
    name: str = "processor"
    family: str = "generic"
    extension: Optional[str] = None

    def process(self, path: Path, text: str) -> str:
        raise NotImplementedError

    def belongs_to(self, family: str) -> bool:
        return self.family == family

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"

class CharsetNormalizer(Processor):
    # strips a leading byte order mark and normalizes line endings.
    name = "charset"

    def process(self, path: Path, text: str) -> str:
        if text.startswith("\ufeff"):
            text = text[1:]
        return text.replace("\r\n", "\n")

class SassEngine(Processor):
    # compiled by the stylesheet compiler; never run during evaluation.
    name = "sass"
    family = SASS_FAMILY

    def __init__(self, extension: str = ".scss"):
        self.extension = extension

    def process(self, path: Path, text: str) -> str:
        return text

class HandlebarsEngine(Processor):
    """Renders `.hbs` assets with pybars using the configured template variables."""
    name = "handlebars"
    family = "handlebars"
    extension = ".hbs"

    def __init__(self, template_vars: Optional[Dict[str, Any]] = None):
        self.template_vars: Dict[str, Any] = dict(template_vars or {})
        self.compiler = pybars.Compiler()

    def process(self, path: Path, text: str) -> str:
        try:
            template = self.compiler.compile(text)
        except pybars.PybarsError as e:
            raise EvaluationError(f"failed to compile template {path}: {e}") from e
        try:
            rendered = template({**self.template_vars, "asset_path": str(path)})
        except pybars.PybarsError as e:
            log.error("template_render_failed", path=str(path), error=str(e))
            raise EvaluationError(f"failed to render template {path}: {e}") from e
        return str(rendered)
