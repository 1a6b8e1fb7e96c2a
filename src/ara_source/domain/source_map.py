from __future__ import annotations

"""
Source Map Aggregate.

Ordered mapping from logical path to source entry. Iteration follows
insertion order, which the assembler drives as directories in caller order
and files in traversal order. A logical path can be inserted only once.
"""

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from ara_source.domain.errors import ErrorKind, LoadError
from ara_source.domain.source_models import OriginKind, SourceEntry

if TYPE_CHECKING:
    from ara_source.core.services.hasher import ContentHasher


class SourceMap:
    """
    Complete inventory produced by one load operation.

    The map is handed to the caller and never retained by the loader.
    """

    def __init__(self, entries: Optional[List[SourceEntry]] = None) -> None:
        self._entries: Dict[str, SourceEntry] = {}
        for entry in entries or []:
            self.add(entry)

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def add(self, entry: SourceEntry) -> None:
        """
        Insert an entry keyed by its logical path.

        Args:
            entry: Entry to insert.

        Raises:
            LoadError: DUPLICATE_SOURCE if the logical path is already present.
                The directory of the entry already in the map is listed first.
        """
        existing = self._entries.get(entry.logical_path)
        if existing is not None:
            raise LoadError(
                ErrorKind.DUPLICATE_SOURCE,
                entry.logical_path,
                directories=(existing.origin.directory, entry.origin.directory),
            )
        self._entries[entry.logical_path] = entry

    def merge(self, other: SourceMap) -> None:
        """
        Move every entry of `other` into this map, emptying `other`.

        Entries are moved in `other`'s order. On a collision, entries moved
        before the colliding one stay here and the rest stay in `other`.
        """
        for path in list(other._entries):
            self.add(other._entries[path])
            del other._entries[path]

    # -------------------------------------------------------------------------
    # READ API
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, logical_path: object) -> bool:
        return logical_path in self._entries

    def __getitem__(self, logical_path: str) -> SourceEntry:
        return self._entries[logical_path]

    def __repr__(self) -> str:
        return f"SourceMap({len(self._entries)} entries)"

    def get(self, logical_path: str, default: Optional[SourceEntry] = None) -> Optional[SourceEntry]:
        return self._entries.get(logical_path, default)

    def keys(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> List[SourceEntry]:
        return list(self._entries.values())

    def by_origin(self, kind: OriginKind) -> List[SourceEntry]:
        """Return entries whose origin matches `kind`, in map order."""
        return [e for e in self._entries.values() if e.origin.kind is kind]

    def fingerprint(self, hasher: ContentHasher) -> str:
        """
        Digest the (logical path, content) sequence in iteration order.

        Each content is hashed on its own and paired with its path, so content
        holding NUL or newline characters cannot mimic an entry boundary. Two
        loads over an unchanged tree yield the same fingerprint.
        """
        lines = [f"{path}\0{hasher.hash(entry.content)}\n" for path, entry in self._entries.items()]
        return hasher.hash("".join(lines))
