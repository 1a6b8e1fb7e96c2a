from __future__ import annotations

"""
Source Map Assembler.

Drives resolution, traversal and entry construction across every requested
source directory and merges the results into a single source map. The
operation is all-or-nothing: the first failure aborts the load and no
partially populated map is ever returned.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterator, List, Optional, Sequence, Union

from ara_source.core.services.builder import build_source_entry
from ara_source.core.services.resolver import resolve_directory, resolve_root
from ara_source.core.services.walker import walk_source_files
from ara_source.domain.config import LoaderConfig
from ara_source.domain.errors import LoadError
from ara_source.domain.result_models import LoadResult, create_error_result, create_success_result
from ara_source.domain.source_map import SourceMap
from ara_source.domain.source_models import Origin, SourceEntry

logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]"]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def load(
        project_root: PathInput,
        source_directories: Sequence[PathInput],
        config: Optional[LoaderConfig] = None,
) -> LoadResult:
    """
    Load every source file under the given directories.

    Never raises a LoadError: the first fatal condition is returned inside
    the result instead.

    Args:
        project_root: Existing directory that logical paths are relative to.
        source_directories: Ordered directories to scan. The first holds
            application code, the rest vendored code. May be empty.
        config: Loader settings; defaults are used when omitted.

    Returns:
        LoadResult: Complete source map on success, single error otherwise.
    """
    root_str = os.fspath(project_root)
    dir_strs = [os.fspath(d) for d in source_directories]

    try:
        source_map = load_directories(root_str, dir_strs, config)
    except LoadError as e:
        return create_error_result(e, root_str, dir_strs)

    return create_success_result(source_map, root_str, dir_strs)


def load_directories(
        project_root: PathInput,
        source_directories: Sequence[PathInput],
        config: Optional[LoaderConfig] = None,
) -> SourceMap:
    """
    Build a source map, raising on the first fatal condition.

    Args:
        project_root: Existing directory that logical paths are relative to.
        source_directories: Ordered directories to scan.
        config: Loader settings; defaults are used when omitted.

    Returns:
        SourceMap: Entries ordered by directory, then by traversal order.

    Raises:
        LoadError: Any of the error kinds; see `ErrorKind`.
    """
    cfg = config or LoaderConfig()
    root = resolve_root(os.fspath(project_root))

    if cfg.workers > 1:
        with ThreadPoolExecutor(max_workers=cfg.workers, thread_name_prefix="SourceReader") as executor:
            return _assemble(root, source_directories, cfg, executor)

    return _assemble(root, source_directories, cfg, None)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _assemble(
        root: str,
        source_directories: Sequence[PathInput],
        cfg: LoaderConfig,
        executor: Optional[ThreadPoolExecutor],
) -> SourceMap:
    source_map = SourceMap()

    for index, directory in enumerate(source_directories):
        resolved = resolve_directory(os.fspath(directory))
        origin = Origin.for_position(index, resolved)
        logger.debug(f"Scanning {origin.kind.value} directory {resolved}")

        before = len(source_map)
        for entry in _iter_entries(resolved, origin, root, cfg, executor):
            source_map.add(entry)

        logger.debug(f"Collected {len(source_map) - before} sources from {resolved}")

    return source_map


def _iter_entries(
        directory: str,
        origin: Origin,
        root: str,
        cfg: LoaderConfig,
        executor: Optional[ThreadPoolExecutor],
) -> Iterator[SourceEntry]:
    """
    Produce the entries of one directory in traversal order.

    The directory is walked to completion before any file is read, so a walk
    failure wins over a read failure whatever the worker count. With an
    executor reads run concurrently, but `Executor.map` hands results back in
    submission order, so a read error surfaces only once every earlier entry
    has been consumed.
    """
    build = partial(
        build_source_entry,
        origin=origin,
        project_root=root,
        encoding=cfg.encoding,
        definition_suffix=cfg.definition_suffix,
    )
    paths: List[str] = list(walk_source_files(directory, cfg.extensions))

    if executor is None:
        yield from map(build, paths)
        return

    yield from executor.map(build, paths)
