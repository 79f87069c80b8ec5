# sassimport/core/globbing.py
"""
Expansion of directory imports such as `@import "components/*"` and
`@import "components/**/*"`.
"""
import re
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple
import structlog

from sassimport.core import paths
from sassimport.core.models import GlobKind, GlobSpec, ResolvedFile
from sassimport.core.resolver import Resolver
from sassimport.environment.base import Environment
from sassimport.exceptions import InvalidGlobPatternError, UnresolvableParentError

log = structlog.get_logger(__name__)

# any glob-looking trailing segment; only "*" and "**/*" survive parse_glob_kind.
GLOB_LIKE = re.compile(r"(\A|/)(\*\*/[^/]*|[^/]*\*[^/]*)\Z")

def is_glob(raw_path: str) -> bool:
    return GLOB_LIKE.search(raw_path) is not None

def split_glob(raw_path: str) -> Optional[Tuple[str, str]]:
    # returns (residual prefix, trailing pattern) or None for plain paths.
    match = GLOB_LIKE.search(raw_path)
    if match is None:
        return None
    return raw_path[:match.start()], match.group(2)

def parse_glob_kind(pattern: str) -> GlobKind:
    try:
        return GlobKind(pattern)
    except ValueError:
        raise InvalidGlobPatternError(
            f"unsupported glob pattern '{pattern}': only '*' and '**/*' are allowed"
        ) from None

class GlobExpander:
    def __init__(self, environment: Environment, resolver: Resolver):
        self.environment = environment
        self.resolver = resolver

    def normalize_parent(self, parent_path: str) -> Path:
        # relative parents are resolved through the environment like any import.
        if paths.is_absolute(parent_path):
            return paths.normalize(parent_path)
        found = self.resolver.find(parent_path, None)
        if found is None:
            raise UnresolvableParentError(f"could not resolve parent file '{parent_path}' for glob import")
        return paths.normalize(found)

    def glob_spec(self, raw_path: str, parent_path: str) -> Tuple[GlobSpec, Path]:
        split = split_glob(raw_path)
        if split is None:
            raise InvalidGlobPatternError(f"'{raw_path}' is not a glob import")
        residual, pattern = split
        kind = parse_glob_kind(pattern)
        if "*" in residual:
            raise InvalidGlobPatternError(
                f"unsupported glob pattern '{raw_path}': wildcards are only allowed in the last segment"
            )

        abs_parent = self.normalize_parent(parent_path)
        base = paths.join(abs_parent.parent.as_posix(), residual)
        base = paths.normalize(paths.to_absolute(base, self.environment.root_path())).as_posix()
        return GlobSpec(base_path=base, kind=kind), abs_parent

    def expand(self, raw_path: str, parent_path: str) -> List[ResolvedFile]:
        """
        Resolves a glob import to the requirable files it names.

        Files come back sorted by full path. Neither the importing file nor the
        file being compiled is ever included. Each returned file is recorded as
        a dependency.
        """
        spec, abs_parent = self.glob_spec(raw_path, parent_path)
        resolved: List[ResolvedFile] = []
        excluded = [abs_parent]
        compiling = self.environment.compiling_file()
        if compiling is not None:
            excluded.append(paths.normalize(paths.to_absolute(compiling, self.environment.root_path())))
        for file_path in self.globbed_files(spec, exclude=excluded):
            self.environment.depend_on(file_path)
            resolved.append(ResolvedFile(file_path))
        log.debug("glob_expanded", raw_path=raw_path, base=spec.base_path, kind=spec.kind.value, count=len(resolved))
        return resolved

    def globbed_files(self, spec: GlobSpec, exclude: Sequence[Path] = ()) -> List[Path]:
        entries = sorted(_enumerate(Path(spec.base_path), spec.kind), key=lambda p: p.as_posix())
        return [
            entry for entry in entries
            if entry not in exclude and self.environment.is_requirable(entry)
        ]

def _enumerate(base: Path, kind: GlobKind) -> Iterator[Path]:
    if not base.is_dir():
        return iter(())
    if kind is GlobKind.SINGLE_LEVEL:
        return base.iterdir()
    return base.rglob("*")
