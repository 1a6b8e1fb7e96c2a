from __future__ import annotations

"""
Content Hashing Service.

Deterministic digests over source text, used to fingerprint loaded maps and
to label entries in command-line reports.
"""

import hashlib
from abc import ABC, abstractmethod


class ContentHasher(ABC):
    """Strategy interface for hashing source content."""

    @abstractmethod
    def hash(self, content: str) -> str:
        """Return a stable digest for `content`."""


class Sha256ContentHasher(ContentHasher):
    """Hex SHA-256 over the UTF-8 encoding of the content."""

    def hash(self, content: str) -> str:
        return hashlib.sha256(content.encode("utf-8")).hexdigest()
