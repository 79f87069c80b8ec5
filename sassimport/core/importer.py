# sassimport/core/importer.py
"""
Entry point of the resolution core.

The compiler hands over an import string and the file it appeared in; the
importer answers with zero, one or many ImportResults. An empty list means
the import could not be resolved, and reporting that is the caller's job.
"""
from typing import List, Optional
import structlog

from sassimport.config.settings import ImporterSettings
from sassimport.core.globbing import GlobExpander, is_glob
from sassimport.core.materializer import DialectConverter, ImportMaterializer
from sassimport.core.models import ImportRequest, ImportResult
from sassimport.core.resolver import Resolver
from sassimport.dialect import convert_indented_to_scss
from sassimport.environment.base import Environment

log = structlog.get_logger(__name__)

class Importer:
    def __init__(
        self,
        environment: Environment,
        settings: Optional[ImporterSettings] = None,
        convert_dialect: DialectConverter = convert_indented_to_scss,
    ):
        self.environment = environment
        self.settings = settings or ImporterSettings(
            roots=list(environment.roots()), root_path=environment.root_path()
        )
        self.resolver = Resolver(environment, self.settings.partial_prefixes)
        self.glob_expander = GlobExpander(environment, self.resolver)
        self.materializer = ImportMaterializer(environment, self.settings.indented_marker, convert_dialect)

    def imports(self, raw_path: str, parent_path: str) -> List[ImportResult]:
        log.debug("import_requested", raw_path=raw_path, parent_path=parent_path)

        if is_glob(raw_path):
            resolved_files = self.glob_expander.expand(raw_path, parent_path)
            return [self.materializer.materialize(f.absolute_path) for f in resolved_files]

        resolved = self.resolver.resolve_single(raw_path, parent_path)
        if resolved is None:
            log.info("import_unresolved", raw_path=raw_path, parent_path=parent_path)
            return []
        return [self.materializer.materialize(resolved.absolute_path)]

    def import_request(self, request: ImportRequest) -> List[ImportResult]:
        return self.imports(request.raw_path, request.parent_path)
