from __future__ import annotations

"""
Directory Walker Service.

Lazily enumerates the recognized source files beneath a directory. The
walk is deterministic: at every level files are visited in sorted order
before the sorted subdirectories are descended. Symbolic links, to files
or to directories, are never followed.
"""

import logging
import os
import stat
from typing import Iterator, Sequence

from ara_source.domain.errors import ErrorKind, LoadError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def walk_source_files(directory: str, extensions: Sequence[str]) -> Iterator[str]:
    """
    Yield the absolute path of every regular source file under `directory`.

    The generator is finite and cannot be resumed once exhausted; call the
    function again to restart the walk.

    Args:
        directory: Canonical absolute directory path.
        extensions: Recognized file name suffixes (e.g. ['.ara']).

    Yields:
        str: Absolute file paths in traversal order.

    Raises:
        LoadError: WALK_FAILED when a directory cannot be listed or a
            candidate file cannot be stat'd.
    """
    suffixes = tuple(extensions)

    for root, dirs, files in os.walk(directory, onerror=_raise_walk_failed, followlinks=False):
        dirs.sort()
        files.sort()

        for file_name in files:
            if not is_source_file(file_name, suffixes):
                continue

            file_path = os.path.join(root, file_name)
            if not _is_regular_file(file_path):
                logger.debug(f"Skipping non-regular file {file_path}")
                continue

            yield file_path


def is_source_file(file_name: str, extensions: Sequence[str]) -> bool:
    """Return True if `file_name` ends with one of the recognized suffixes."""
    return file_name.endswith(tuple(extensions))


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_regular_file(path: str) -> bool:
    try:
        mode = os.lstat(path).st_mode
    except OSError as e:
        raise LoadError(ErrorKind.WALK_FAILED, path, reason=e.strerror or str(e)) from e
    return stat.S_ISREG(mode)


def _raise_walk_failed(error: OSError) -> None:
    """os.walk error hook; the default would skip unreadable directories silently."""
    path = error.filename if error.filename is not None else "<unknown>"
    raise LoadError(ErrorKind.WALK_FAILED, os.fspath(path), reason=error.strerror or str(error)) from error
