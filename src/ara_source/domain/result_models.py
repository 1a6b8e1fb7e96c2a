from __future__ import annotations

"""
Load Result Data Models.

Defines the value returned by the public `load` operation and the factory
functions used to build it. A result holds either a complete source map or
exactly one error, never both.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ara_source.domain.errors import LoadError
from ara_source.domain.source_map import SourceMap

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of one load operation.

    Attributes:
        ok: True when the source map is complete.
        error: The first fatal condition encountered, on failure.
        source_map: The populated map on success, None on failure.
        project_root: Project root as supplied by the caller.
        directories: Source directories as supplied by the caller.
    """
    ok: bool
    error: Optional[LoadError]
    source_map: Optional[SourceMap]

    project_root: str
    directories: List[str] = field(default_factory=list)

    def unwrap(self) -> SourceMap:
        """Return the source map, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        if self.source_map is None:
            raise ValueError("LoadResult holds neither a source map nor an error")
        return self.source_map

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        source_map: SourceMap,
        project_root: str,
        directories: Sequence[str],
) -> LoadResult:
    """
    Create a successful load result.

    Args:
        source_map: Completed map.
        project_root: Caller-supplied root.
        directories: Caller-supplied directories.

    Returns:
        LoadResult: An immutable success result.
    """
    return LoadResult(
        ok=True,
        error=None,
        source_map=source_map,
        project_root=project_root,
        directories=list(directories),
    )


def create_error_result(
        error: LoadError,
        project_root: str,
        directories: Sequence[str],
) -> LoadResult:
    """
    Create a failed load result carrying no partial map.

    Args:
        error: The fatal condition.
        project_root: Caller-supplied root.
        directories: Caller-supplied directories.

    Returns:
        LoadResult: An immutable error result.
    """
    return LoadResult(
        ok=False,
        error=error,
        source_map=None,
        project_root=project_root,
        directories=list(directories),
    )
