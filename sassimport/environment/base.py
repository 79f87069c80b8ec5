# sassimport/environment/base.py
"""
The capability set the resolution core consumes from its host.

The core never subclasses a host importer or reaches into ambient options;
it is handed an object satisfying `Environment` and calls only these methods.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from .processors import Processor

@dataclass(frozen=True)
class AssetAttributes:
    content_type: str
    engines: List[Processor] = field(default_factory=list)

@runtime_checkable
class Environment(Protocol):
    def resolve(self, candidate: str) -> Iterable[Path]:
        """Expands a logical candidate into the physical paths worth testing."""
        ...

    def is_requirable(self, path: Path) -> bool:
        ...

    def roots(self) -> Sequence[Path]:
        ...

    def root_path(self) -> Path:
        ...

    def attributes_for(self, path: Path) -> AssetAttributes:
        ...

    def preprocessors(self, content_type: str) -> List[Processor]:
        ...

    def evaluate(self, path: Path, processors: Sequence[Processor]) -> str:
        ...

    def depend_on(self, path: Path) -> None:
        """Records `path` as a build dependency of the current compilation."""
        ...

    def compiling_file(self) -> Optional[Path]:
        """The top-level file of the current compilation, if there is one."""
        ...
