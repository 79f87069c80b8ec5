# sassimport/core/paths.py
"""
Pure path helpers used by candidate building and glob expansion.

Paths are handled as POSIX-style strings because import directives and the
environment's candidate names are strings; nothing here touches the disk.
"""
import posixpath
from pathlib import Path
from typing import Iterable, Optional, Tuple

def is_absolute(path: str | Path) -> bool:
    return Path(path).is_absolute()

def to_absolute(path: str | Path, root_base: str | Path) -> Path:
    # prefixes root_base when path is relative.
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return Path(root_base) / candidate

def split(path: str) -> Tuple[str, str]:
    """
    Splits a path into (directory, file name).

    A bare file name yields "." as its directory, and a trailing separator is
    ignored, so split("a/b/") == ("a", "b").
    """
    trimmed = path.rstrip("/") or path
    directory, file_name = posixpath.split(trimmed)
    if not directory:
        directory = "."
    elif directory != "/":
        directory = directory.rstrip("/") or "/"
    return directory, file_name

def relative_to(path: str | Path, base: str | Path) -> str:
    # relative path from base to path, allowing ".." steps.
    return posixpath.relpath(Path(path).as_posix(), Path(base).as_posix())

def join(directory: str, *parts: str) -> str:
    # joining onto "." yields the bare remainder, never "./name".
    kept = [p for p in parts if p and p != "."]
    remainder = posixpath.join(*kept) if kept else ""
    if directory == ".":
        return remainder or "."
    if not remainder:
        return directory
    return posixpath.join(directory, remainder)

def normalize(path: str | Path) -> Path:
    # collapses "." and ".." segments lexically; symlinks are left alone.
    return Path(posixpath.normpath(Path(path).as_posix()))

def longest_containing_root(
    directory: str | Path,
    roots: Iterable[str | Path],
    default_root: Optional[str | Path] = None,
) -> Optional[Path]:
    """
    Returns the configured root whose string form prefixes `directory`.

    When several roots match (nested roots), the longest one wins. Falls back
    to `default_root` when no root contains the directory.
    """
    dir_str = Path(directory).as_posix()
    best: Optional[Path] = None
    for root in roots:
        root_str = Path(root).as_posix()
        if dir_str.startswith(root_str):
            if best is None or len(root_str) > len(best.as_posix()):
                best = Path(root)
    if best is None and default_root is not None:
        return Path(default_root)
    return best
