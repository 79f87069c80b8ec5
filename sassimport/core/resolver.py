# sassimport/core/resolver.py
from pathlib import Path
from typing import Optional, Sequence
import structlog

from sassimport.config.settings import DEFAULT_PARTIAL_PREFIXES
from sassimport.core import paths
from sassimport.core.candidates import build_candidates
from sassimport.core.models import ResolvedFile
from sassimport.environment.base import Environment

log = structlog.get_logger(__name__)

class Resolver:
    """Resolves a single import path to the first requirable file."""
    def __init__(self, environment: Environment, prefixes: Sequence[str] = DEFAULT_PARTIAL_PREFIXES):
        self.environment = environment
        self.prefixes = tuple(prefixes)

    def find(self, raw_path: str, parent_path: Optional[str] = None) -> Optional[Path]:
        """
        Returns the first requirable path, without recording a dependency.

        Candidates are tried in order and each is expanded by the environment;
        the first requirable try-path anywhere ends the search, even if a later
        candidate would have matched more specifically.
        """
        candidates = build_candidates(raw_path, parent_path, self.environment, self.prefixes)
        for candidate in candidates:
            for try_path in self.environment.resolve(candidate):
                if self.environment.is_requirable(try_path):
                    return paths.to_absolute(try_path, self.environment.root_path())
        return None

    def resolve_single(self, raw_path: str, parent_path: Optional[str] = None) -> Optional[ResolvedFile]:
        # None means nothing matched; callers decide whether that is an error.
        found = self.find(raw_path, parent_path)
        if found is None:
            log.debug("import_not_found", raw_path=raw_path, parent_path=parent_path)
            return None
        self.environment.depend_on(found)
        log.debug("import_resolved", raw_path=raw_path, parent_path=parent_path, found_path=str(found))
        return ResolvedFile(found)
