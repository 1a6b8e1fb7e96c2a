from __future__ import annotations

"""
Source Domain Data Models.

Immutable value objects describing a discovered source file and where it
came from. Entries are produced once per file by the entry builder and are
owned by the resulting source map.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# PROVENANCE
# -----------------------------------------------------------------------------

class OriginKind(str, Enum):
    """Whether a file belongs to the project itself or to a vendored tree."""

    APPLICATION = "application"
    VENDORED = "vendored"


@dataclass(frozen=True)
class Origin:
    """
    Provenance tag attached to every source entry.

    Attributes:
        kind: Application for the first source directory, vendored otherwise.
        directory: Canonical path of the source directory that produced the file.
    """
    kind: OriginKind
    directory: str

    @classmethod
    def application(cls, directory: str) -> Origin:
        return cls(OriginKind.APPLICATION, directory)

    @classmethod
    def vendored(cls, directory: str) -> Origin:
        return cls(OriginKind.VENDORED, directory)

    @classmethod
    def for_position(cls, index: int, directory: str) -> Origin:
        """Tag the directory at `index` of the caller's ordered list."""
        if index == 0:
            return cls.application(directory)
        return cls.vendored(directory)

    @property
    def is_vendored(self) -> bool:
        return self.kind is OriginKind.VENDORED

# -----------------------------------------------------------------------------
# SOURCE ENTRY
# -----------------------------------------------------------------------------

class SourceKind(str, Enum):
    # Declares foreign symbols; never executed.
    DEFINITION = "definition"
    SCRIPT = "script"


@dataclass(frozen=True)
class SourceEntry:
    """
    Content and provenance of one discovered source file.

    Attributes:
        logical_path: Root-relative path with '/' separators; the map key.
        content: Raw file text, untouched.
        origin: Directory the file was discovered under.
        absolute_path: Canonical filesystem path, kept for diagnostics.
        kind: Definition or script, derived from the file name.
    """
    logical_path: str
    content: str
    origin: Origin
    absolute_path: str
    kind: SourceKind = SourceKind.SCRIPT

    @property
    def name(self) -> str:
        return self.logical_path
