from __future__ import annotations

"""
Loader Configuration Domain.

Holds the default runtime settings of the loader, the immutable
configuration object consumed by the services, and JSON file loading for
project-level overrides.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from ara_source.domain.constants import (
    ARA_DEFINITION_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_WORKERS,
    default_extensions,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoaderConfig:
    """
    Immutable settings for one load operation.

    Attributes:
        extensions: File name suffixes recognized as source files.
        definition_suffix: Suffix marking a file as a definition source.
        encoding: Text encoding used to decode file content.
        workers: Number of reader threads; 1 reads sequentially.
    """
    extensions: List[str] = field(default_factory=default_extensions)
    definition_suffix: str = ARA_DEFINITION_SUFFIX
    encoding: str = DEFAULT_ENCODING
    workers: int = DEFAULT_WORKERS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoaderConfig:
        """Build from an already validated dictionary, ignoring unknown keys."""
        defaults = get_default_config()
        return cls(
            extensions=list(data.get("extensions", defaults["extensions"])),
            definition_suffix=data.get("definition_suffix", defaults["definition_suffix"]),
            encoding=data.get("encoding", defaults["encoding"]),
            workers=int(data.get("workers", defaults["workers"])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default loader configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "extensions": default_extensions(),
        "definition_suffix": ARA_DEFINITION_SUFFIX,
        "encoding": DEFAULT_ENCODING,
        "workers": DEFAULT_WORKERS,
    }

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def load_config_file(path: str) -> Dict[str, Any]:
    """
    Read configuration overrides from a JSON file.

    Args:
        path: Location of a JSON document whose top level is an object.

    Returns:
        Dict[str, Any]: Raw overrides, to be passed through the validator.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not valid JSON or not an object.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file '{path}' must contain a JSON object.")

    logger.debug(f"Loaded {len(data)} config keys from {path}")
    return data
