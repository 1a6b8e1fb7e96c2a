from __future__ import annotations

"""
Source-file loader for the Ara toolchain.

Discovers `.ara` files under a project's own source tree and its vendored
trees, and returns them as an ordered map keyed by root-relative path.
"""

from ara_source.core.services.assembler import load, load_directories
from ara_source.core.services.hasher import ContentHasher, Sha256ContentHasher
from ara_source.domain.config import LoaderConfig
from ara_source.domain.errors import ErrorKind, LoadError
from ara_source.domain.result_models import LoadResult
from ara_source.domain.source_map import SourceMap
from ara_source.domain.source_models import Origin, OriginKind, SourceEntry, SourceKind

__version__ = "0.1.0"

__all__ = [
    "ContentHasher",
    "ErrorKind",
    "LoadError",
    "LoadResult",
    "LoaderConfig",
    "Origin",
    "OriginKind",
    "Sha256ContentHasher",
    "SourceEntry",
    "SourceKind",
    "SourceMap",
    "load",
    "load_directories",
]
