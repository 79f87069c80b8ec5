# sassimport/core/models.py
"""Value types passed between the resolution components."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

@dataclass(frozen=True)
class ImportRequest:
    # one @import directive: the raw path and the file that contains it.
    raw_path: str
    parent_path: str

@dataclass(frozen=True)
class ResolvedFile:
    # a file the environment confirmed as requirable.
    absolute_path: Path

class GlobKind(Enum):
    SINGLE_LEVEL = "*"
    RECURSIVE = "**/*"

@dataclass(frozen=True)
class GlobSpec:
    base_path: str
    kind: GlobKind

@dataclass(frozen=True)
class ImportResult:
    # the unit handed back to the compiler.
    path: str
    content: str

class Dialect(Enum):
    STANDARD = "scss"
    INDENTED = "sass"

    @classmethod
    def for_path(cls, path: Path | str, indented_marker: str = ".sass") -> "Dialect":
        # the marker is matched anywhere in the file name, e.g. "a.css.sass.hbs".
        return cls.INDENTED if indented_marker in Path(path).name else cls.STANDARD
