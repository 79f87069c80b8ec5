from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import structlog

log = structlog.get_logger(__name__)

# order matters: the first extension that yields a requirable file wins.
DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    ".css.scss",
    ".css.sass",
    ".scss",
    ".sass",
    ".css",
    ".scss.hbs",
    ".css.hbs",
    ".sass.hbs",
)

# plain names are tried before underscore-prefixed partials.
DEFAULT_PARTIAL_PREFIXES: Tuple[str, ...] = ("", "_")

# file names containing this marker are written in the indented dialect.
DEFAULT_INDENTED_MARKER = ".sass"

DEFAULT_CONTENT_TYPE = "text/css"

@dataclass(frozen=True)
class ImporterSettings:
    # read-only configuration shared by every compilation.
    roots: Tuple[Path, ...] = ()
    root_path: Optional[Path] = None
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    partial_prefixes: Tuple[str, ...] = DEFAULT_PARTIAL_PREFIXES
    indented_marker: str = DEFAULT_INDENTED_MARKER
    exclude_patterns: Tuple[str, ...] = ()
    template_vars: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # normalizes paths and turns every sequence into a tuple.
        root_path = Path(self.root_path if self.root_path is not None else Path.cwd()).resolve()
        roots = tuple(
            (Path(r) if Path(r).is_absolute() else root_path / r).resolve()
            for r in self.roots
        )
        if not roots:
            log.debug("no_roots_configured_using_root_path", root_path=str(root_path))
            roots = (root_path,)
        object.__setattr__(self, "root_path", root_path)
        object.__setattr__(self, "roots", roots)
        object.__setattr__(self, "extensions", tuple(self.extensions))
        object.__setattr__(self, "partial_prefixes", tuple(self.partial_prefixes))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        object.__setattr__(self, "template_vars", dict(self.template_vars))
