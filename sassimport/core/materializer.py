# sassimport/core/materializer.py
from pathlib import Path
from typing import Callable, List, Optional
import structlog

from sassimport.config.settings import DEFAULT_INDENTED_MARKER
from sassimport.core.models import Dialect, ImportResult
from sassimport.dialect import convert_indented_to_scss
from sassimport.environment.base import Environment
from sassimport.environment.processors import SASS_FAMILY, Processor

log = structlog.get_logger(__name__)

DialectConverter = Callable[[str], str]

class ImportMaterializer:
    """
    Turns a resolved file into the text handed to the compiler.

    The environment evaluates the file through its preprocessors and engines,
    minus the stylesheet compiler's own engines: those run inside the
    compiler, and running them here as well would process the file twice.
    Indented-syntax files are then converted to bracketed syntax.
    """
    def __init__(
        self,
        environment: Environment,
        indented_marker: str = DEFAULT_INDENTED_MARKER,
        convert_dialect: DialectConverter = convert_indented_to_scss,
    ):
        self.environment = environment
        self.indented_marker = indented_marker
        self.convert_dialect = convert_dialect

    def processors_for(self, path: Path) -> List[Processor]:
        attributes = self.environment.attributes_for(path)
        processors = list(self.environment.preprocessors(attributes.content_type))
        processors.extend(reversed(attributes.engines))
        return [p for p in processors if not p.belongs_to(SASS_FAMILY)]

    def materialize(self, absolute_path: Path | str, dialect: Optional[Dialect] = None) -> ImportResult:
        path = Path(absolute_path)
        if dialect is None:
            dialect = Dialect.for_path(path, self.indented_marker)

        # evaluation errors propagate untouched.
        content = self.environment.evaluate(path, self.processors_for(path))
        if dialect is Dialect.INDENTED:
            content = self.convert_dialect(content)

        log.debug("import_materialized", path=str(path), dialect=dialect.value, size=len(content))
        return ImportResult(path=str(path), content=content)
