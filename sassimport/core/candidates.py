# sassimport/core/candidates.py
from typing import List, Optional, Sequence
import structlog

from sassimport.config.settings import DEFAULT_PARTIAL_PREFIXES
from sassimport.core import paths
from sassimport.environment.base import Environment

log = structlog.get_logger(__name__)

def collect_search_paths(
    specified_dir: str,
    parent_path: Optional[str],
    environment: Environment,
) -> List[str]:
    """
    Returns the directories to search, most specific first.

    The directory written in the import is always searched. When the importing
    file lives below one of the environment's roots, the same directory taken
    relative to the importing file's position inside that root is searched
    before it.
    """
    search_paths = [specified_dir]
    if parent_path is None:
        return search_paths

    # parent paths may arrive relative; anchor them at the environment root.
    absolute_parent = paths.to_absolute(parent_path, environment.root_path())
    parent_dir = absolute_parent.parent
    root = paths.longest_containing_root(parent_dir, environment.roots(), environment.root_path())

    if not paths.is_absolute(specified_dir) and parent_dir != root:
        relative_dir = paths.relative_to(parent_dir, root)
        search_paths.insert(0, paths.join(relative_dir, specified_dir))
    return search_paths

def build_candidates(
    raw_path: str,
    parent_path: Optional[str],
    environment: Environment,
    prefixes: Sequence[str] = DEFAULT_PARTIAL_PREFIXES,
) -> List[str]:
    """
    Builds the ordered list of logical paths to hand to the environment.

    Order is search-path major, prefix minor. Extensions are not appended;
    the environment expands each candidate into concrete files.
    """
    specified_dir, specified_file = paths.split(raw_path)
    search_paths = collect_search_paths(specified_dir, parent_path, environment)

    candidates = [
        paths.join(search_path, prefix + specified_file)
        for search_path in search_paths
        for prefix in prefixes
    ]
    log.debug("import_candidates_built", raw_path=raw_path, parent_path=parent_path, candidates=candidates)
    return candidates
