from __future__ import annotations

"""
Path Resolution Service.

Canonicalizes the project root and each requested source directory before
any traversal happens. Only filesystem metadata is queried.
"""

import logging
import os

from ara_source.domain.errors import ErrorKind, LoadError
from ara_source.infra.fs import canonical_path

logger = logging.getLogger(__name__)


def resolve_root(project_root: str) -> str:
    """
    Canonicalize the project root.

    Args:
        project_root: Absolute or working-directory-relative path.

    Returns:
        str: Canonical absolute path of the root directory.

    Raises:
        LoadError: INVALID_ROOT if the path is missing or not a directory.
    """
    resolved = canonical_path(os.fspath(project_root))
    if not os.path.isdir(resolved):
        raise LoadError(ErrorKind.INVALID_ROOT, os.fspath(project_root))

    logger.debug(f"Project root resolved to {resolved}")
    return resolved


def resolve_directory(directory: str) -> str:
    """
    Canonicalize one source directory.

    Relative paths are taken from the caller's working directory, not from
    the project root.

    Args:
        directory: Caller-supplied source directory.

    Returns:
        str: Canonical absolute path of the directory.

    Raises:
        LoadError: INVALID_SOURCE_DIRECTORY naming the path as supplied.
    """
    resolved = canonical_path(os.fspath(directory))
    if not os.path.isdir(resolved):
        raise LoadError(ErrorKind.INVALID_SOURCE_DIRECTORY, os.fspath(directory))
    return resolved
