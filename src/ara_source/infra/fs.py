from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Cross-platform path manipulation used by the resolver and the entry
builder: canonicalization, containment checks and conversion to
separator-normalized logical paths. Shell-style expansion of typed input
is kept separate and only the command line applies it.
"""

import os

from ara_source.domain.constants import LOGICAL_SEPARATOR

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def expand_user_input(path: str) -> str:
    """
    Expand the home shortcut (~/) and environment variables ($VAR/%VAR%).

    Meant for paths typed on a command line. The loader itself never
    expands, so a directory literally named '$LIB' stays addressable.
    """
    return os.path.expandvars(os.path.expanduser(path))


def canonical_path(path: str) -> str:
    """
    Resolve a path into its canonical absolute form.

    Relative paths are anchored at the working directory, then symlinks and
    '..' segments are resolved. The name is otherwise taken verbatim.
    """
    return os.path.realpath(os.path.abspath(path))


def is_within(path: str, root: str) -> bool:
    """
    Check whether `path` lies under `root`.

    Both arguments must already be canonical. Comparison is by whole path
    segments, so '/proj-extra' is not within '/proj'.
    """
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False


def to_logical_path(path: str, root: str) -> str:
    """
    Express `path` relative to `root` with '/' separators.

    Args:
        path: Canonical absolute path under `root`.
        root: Canonical absolute project root.

    Returns:
        str: Separator-normalized relative path.
    """
    rel = os.path.relpath(path, root)
    if os.sep != LOGICAL_SEPARATOR:
        rel = rel.replace(os.sep, LOGICAL_SEPARATOR)
    if os.altsep and os.altsep != LOGICAL_SEPARATOR:
        rel = rel.replace(os.altsep, LOGICAL_SEPARATOR)
    return rel
