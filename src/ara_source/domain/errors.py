from __future__ import annotations

"""
Load Error Domain.

A single exception type carries every failure the loader can produce. The
failure category is a closed enumeration so callers can dispatch on
`error.kind` instead of on a class hierarchy.
"""

from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    """Fixed set of conditions that abort a load."""

    INVALID_ROOT = "invalid_root"
    INVALID_SOURCE_DIRECTORY = "invalid_source_directory"
    WALK_FAILED = "walk_failed"
    READ_FAILED = "read_failed"
    PATH_OUTSIDE_ROOT = "path_outside_root"
    DUPLICATE_SOURCE = "duplicate_source"


_MESSAGES = {
    ErrorKind.INVALID_ROOT: "project root `{path}` does not exist or is not a directory",
    ErrorKind.INVALID_SOURCE_DIRECTORY: "source directory `{path}` does not exist or is not a directory",
    ErrorKind.WALK_FAILED: "failed to traverse `{path}`",
    ErrorKind.READ_FAILED: "failed to read `{path}`",
    ErrorKind.PATH_OUTSIDE_ROOT: "file `{path}` is not located under the project root",
    ErrorKind.DUPLICATE_SOURCE: "source `{path}` is provided by more than one directory",
}


class LoadError(Exception):
    """
    Fatal condition raised while building a source map.

    Attributes:
        kind: Category of the failure.
        path: Offending filesystem path, or the logical path for duplicates.
        directories: Contributing source directories (two for duplicates).
        reason: Underlying OS or decoding message, when there is one.
    """

    def __init__(
            self,
            kind: ErrorKind,
            path: str,
            *,
            directories: Tuple[str, ...] = (),
            reason: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.path = path
        self.directories = tuple(directories)
        self.reason = reason
        super().__init__(self._render())

    def _render(self) -> str:
        message = _MESSAGES[self.kind].format(path=self.path)
        if self.directories:
            message += " (" + ", ".join(f"`{d}`" for d in self.directories) + ")"
        if self.reason:
            message += f": {self.reason}"
        return message

    def __repr__(self) -> str:
        return f"LoadError(kind={self.kind.name}, path={self.path!r})"
