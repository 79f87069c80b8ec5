# sassimport/environment/filesystem.py
"""
A host environment backed by plain directories on disk.

`FileSystemEnvironment` holds the configuration shared by every compilation
(roots, extensions, exclusions, processors). Each compilation runs against a
`CompilationContext`, which adds the per-compilation dependency list.
"""
from pathlib import Path
from typing import Iterator, List, Optional, Sequence
import pathspec
import structlog

from sassimport.config.settings import DEFAULT_CONTENT_TYPE, ImporterSettings
from sassimport.exceptions import ConfigError, EvaluationError

from .base import AssetAttributes
from .processors import CharsetNormalizer, HandlebarsEngine, Processor, SassEngine

log = structlog.get_logger(__name__)

STYLESHEET_SUFFIXES = {".css", ".scss", ".sass"}

def compile_exclude_spec(patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    # compiles gitwildmatch exclude patterns; None when there are none.
    if not patterns:
        return None
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", patterns)
    except Exception as e:
        raise ConfigError(f"error compiling exclude patterns {list(patterns)}: {e}") from e

class FileSystemEnvironment:
    def __init__(self, settings: ImporterSettings):
        self.settings = settings
        self.exclude_spec = compile_exclude_spec(settings.exclude_patterns)
        self.handlebars = HandlebarsEngine(settings.template_vars)
        self._css_preprocessors: List[Processor] = [CharsetNormalizer()]

    def roots(self) -> Sequence[Path]:
        return tuple(self.settings.roots)

    def root_path(self) -> Path:
        return self.settings.root_path

    def resolve(self, candidate: str) -> Iterator[Path]:
        """
        Yields physical paths for a logical candidate, exact name first and
        then each configured extension, for every root in order.
        """
        candidate_path = Path(candidate)
        bases = [candidate_path] if candidate_path.is_absolute() else [root / candidate for root in self.settings.roots]
        for base in bases:
            yield base
            for ext in self.settings.extensions:
                yield Path(f"{base}{ext}")

    def is_requirable(self, path: Path) -> bool:
        path = Path(path)
        if not path.is_file():
            return False
        if not any(path.name.endswith(ext) for ext in self.settings.extensions):
            return False
        if self.exclude_spec is not None and self.exclude_spec.match_file(self._match_key(path)):
            log.debug("asset_excluded_by_pattern", path=str(path))
            return False
        return True

    def _match_key(self, path: Path) -> str:
        # exclude patterns are matched relative to the root holding the file.
        for root in self.settings.roots:
            if path.is_relative_to(root):
                return path.relative_to(root).as_posix()
        return path.as_posix()

    def attributes_for(self, path: Path) -> AssetAttributes:
        suffixes = _extension_chain(Path(path))
        engines: List[Processor] = []
        content_type = "application/octet-stream"
        for suffix in suffixes:
            if suffix in STYLESHEET_SUFFIXES:
                content_type = DEFAULT_CONTENT_TYPE
                if suffix != ".css":
                    engines.append(SassEngine(suffix))
            elif suffix == HandlebarsEngine.extension:
                engines.append(self.handlebars)
        return AssetAttributes(content_type=content_type, engines=engines)

    def preprocessors(self, content_type: str) -> List[Processor]:
        if content_type == DEFAULT_CONTENT_TYPE:
            return list(self._css_preprocessors)
        return []

    def evaluate(self, path: Path, processors: Sequence[Processor]) -> str:
        path = Path(path)
        try:
            text = path.read_bytes().decode("utf-8")
        except OSError as e:
            raise EvaluationError(f"failed to read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise EvaluationError(f"{path} is not valid utf-8: {e}") from e
        for processor in processors:
            log.debug("applying_processor", path=str(path), processor=processor.name)
            text = processor.process(path, text)
        return text

    def compilation(self, pathname: Optional[Path] = None) -> "CompilationContext":
        return CompilationContext(self, pathname)

class CompilationContext:
    """Per-compilation view of an environment; owns the dependency list."""
    def __init__(self, environment: FileSystemEnvironment, pathname: Optional[Path] = None):
        self.environment = environment
        self.pathname = Path(pathname) if pathname is not None else None
        self.dependencies: List[Path] = []

    def roots(self) -> Sequence[Path]:
        return self.environment.roots()

    def root_path(self) -> Path:
        return self.environment.root_path()

    def resolve(self, candidate: str) -> Iterator[Path]:
        return self.environment.resolve(candidate)

    def is_requirable(self, path: Path) -> bool:
        return self.environment.is_requirable(path)

    def attributes_for(self, path: Path) -> AssetAttributes:
        return self.environment.attributes_for(path)

    def preprocessors(self, content_type: str) -> List[Processor]:
        return self.environment.preprocessors(content_type)

    def evaluate(self, path: Path, processors: Sequence[Processor]) -> str:
        return self.environment.evaluate(path, processors)

    def depend_on(self, path: Path) -> None:
        self.dependencies.append(Path(path))

    def compiling_file(self) -> Optional[Path]:
        return self.pathname

def _extension_chain(path: Path) -> List[str]:
    # "_grid.css.scss.hbs" -> [".css", ".scss", ".hbs"]; leading dots are part of the stem.
    name = path.name.lstrip("_.")
    parts = name.split(".")
    return ["." + p for p in parts[1:] if p]
