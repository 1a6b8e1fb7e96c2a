from __future__ import annotations

"""
Domain Constants.

File naming conventions recognized by the loader and default runtime values
shared by the configuration layer and the discovery services.
"""

from typing import List

ARA_SCRIPT_EXTENSION = ".ara"
ARA_DEFINITION_SUFFIX = ".d.ara"

DEFAULT_ENCODING = "utf-8"
DEFAULT_WORKERS = 1

# Logical paths always use forward slashes regardless of platform
LOGICAL_SEPARATOR = "/"


def default_extensions() -> List[str]:
    """Return a fresh copy of the recognized source-file extensions."""
    return [ARA_SCRIPT_EXTENSION]
