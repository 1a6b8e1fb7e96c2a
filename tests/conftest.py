from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Makes the 'src' directory importable without installing the package.
2. Provides on-disk project layouts used across unit and integration tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    Create a small project with one application tree and two vendored trees.

    Structure:
    /proj
      /src
        a.ara              "X"
        main.ara
        notes.md
        /util
          strings.ara
      /vendor
        /foo
          b.ara            "Y"
          write_line.d.ara
        /bar
          bar.d.ara
          /docs
            README.txt
    """
    root = tmp_path / "proj"

    write_file(root / "src" / "a.ara", "X")
    write_file(root / "src" / "main.ara", "function main(): void {}\n")
    write_file(root / "src" / "notes.md", "# not a source file")
    write_file(root / "src" / "util" / "strings.ara", "function upper(string $s): string {}\n")

    write_file(root / "vendor" / "foo" / "b.ara", "Y")
    write_file(root / "vendor" / "foo" / "write_line.d.ara", "function write_line(string $s): void;\n")

    write_file(root / "vendor" / "bar" / "bar.d.ara", "function bar(): void;\n")
    write_file(root / "vendor" / "bar" / "docs" / "README.txt", "docs")

    return root


@pytest.fixture
def project_dirs(project: Path) -> list:
    return [
        str(project / "src"),
        str(project / "vendor" / "foo"),
        str(project / "vendor" / "bar"),
    ]


@pytest.fixture
def write():
    """Expose the file writer to tests that build their own layouts."""
    return write_file
