from __future__ import annotations

"""
Source Entry Builder.

Reads one discovered file in full and wraps it with its logical path,
origin and kind. Content is decoded strictly: a file that is not valid text
in the configured encoding is a read failure, not a lossy substitution.
"""

import os

from ara_source.domain.constants import ARA_DEFINITION_SUFFIX, DEFAULT_ENCODING
from ara_source.domain.errors import ErrorKind, LoadError
from ara_source.domain.source_models import Origin, SourceEntry, SourceKind
from ara_source.infra.fs import is_within, to_logical_path


def build_source_entry(
        file_path: str,
        origin: Origin,
        project_root: str,
        *,
        encoding: str = DEFAULT_ENCODING,
        definition_suffix: str = ARA_DEFINITION_SUFFIX,
) -> SourceEntry:
    """
    Construct the source entry for one file.

    Args:
        file_path: Canonical absolute path produced by the walker.
        origin: Provenance of the directory being walked.
        project_root: Canonical project root.
        encoding: Text encoding of the file content.
        definition_suffix: Suffix that marks definition sources.

    Returns:
        SourceEntry: The immutable entry.

    Raises:
        LoadError: PATH_OUTSIDE_ROOT if the file is not under the root,
            READ_FAILED if it cannot be opened, read or decoded.
    """
    if not is_within(file_path, project_root):
        raise LoadError(ErrorKind.PATH_OUTSIDE_ROOT, file_path, directories=(origin.directory,))

    logical_path = to_logical_path(file_path, project_root)
    content = read_source_text(file_path, encoding)

    return SourceEntry(
        logical_path=logical_path,
        content=content,
        origin=origin,
        absolute_path=file_path,
        kind=classify(os.path.basename(file_path), definition_suffix),
    )


def read_source_text(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole file as text, preserving its line endings.

    Raises:
        LoadError: READ_FAILED carrying the underlying reason.
    """
    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise LoadError(
            ErrorKind.READ_FAILED, file_path, reason=f"not valid {encoding} text ({e.reason})"
        ) from e
    except OSError as e:
        raise LoadError(ErrorKind.READ_FAILED, file_path, reason=e.strerror or str(e)) from e


def classify(file_name: str, definition_suffix: str = ARA_DEFINITION_SUFFIX) -> SourceKind:
    if file_name.endswith(definition_suffix):
        return SourceKind.DEFINITION
    return SourceKind.SCRIPT
