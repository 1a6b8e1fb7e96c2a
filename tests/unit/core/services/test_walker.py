from __future__ import annotations

"""
Unit tests for the Directory Walker.

Verifies:
1. Extension filtering at every depth.
2. Deterministic traversal order.
3. Symbolic links are never followed.
4. Traversal failures surface as WALK_FAILED.
"""

import os
import types
from pathlib import Path
from unittest.mock import patch

import pytest

from ara_source.core.services.walker import is_source_file, walk_source_files
from ara_source.domain.errors import ErrorKind, LoadError


def _rel(paths, base: Path):
    return [os.path.relpath(p, str(base)).replace(os.sep, "/") for p in paths]


def test_walk_filters_to_source_extension(project: Path) -> None:
    files = list(walk_source_files(str(project), [".ara"]))

    assert files, "Expected at least one source file."
    assert all(f.endswith(".ara") for f in files)
    assert not any(f.endswith((".md", ".txt")) for f in files)


def test_walk_orders_files_before_sorted_subdirectories(project: Path) -> None:
    files = _rel(walk_source_files(str(project / "src"), [".ara"]), project / "src")
    assert files == ["a.ara", "main.ara", "util/strings.ara"]


def test_walk_is_deterministic(project: Path) -> None:
    first = list(walk_source_files(str(project), [".ara"]))
    second = list(walk_source_files(str(project), [".ara"]))
    assert first == second


def test_walk_returns_lazy_generator(project: Path) -> None:
    walker = walk_source_files(str(project), [".ara"])
    assert isinstance(walker, types.GeneratorType)

    list(walker)
    assert list(walker) == [], "An exhausted walk must not restart."


def test_walk_yields_absolute_paths(project: Path) -> None:
    for f in walk_source_files(str(project / "vendor"), [".ara"]):
        assert os.path.isabs(f)


def test_walk_supports_multiple_extensions(project: Path, write) -> None:
    write(project / "src" / "extra.ara.inc", "inc")
    files = _rel(walk_source_files(str(project / "src"), [".ara", ".inc"]), project / "src")
    assert "extra.ara.inc" in files


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_walk_does_not_follow_symlinks(project: Path, tmp_path: Path, write) -> None:
    outside = tmp_path / "outside"
    write(outside / "linked.ara", "outside")
    try:
        os.symlink(str(outside), str(project / "src" / "linked_dir"), target_is_directory=True)
        os.symlink(str(outside / "linked.ara"), str(project / "src" / "linked_file.ara"))
    except OSError:
        pytest.skip("cannot create symlinks here")

    files = _rel(walk_source_files(str(project / "src"), [".ara"]), project / "src")

    assert "linked_file.ara" not in files
    assert not any(f.startswith("linked_dir/") for f in files)


def test_is_source_file() -> None:
    assert is_source_file("main.ara", [".ara"])
    assert is_source_file("io.d.ara", [".ara"])
    assert not is_source_file("main.ara.bak", [".ara"])
    assert not is_source_file("ara", [".ara"])


def test_walk_missing_directory_raises_walk_failed(tmp_path: Path) -> None:
    missing = tmp_path / "gone"
    with pytest.raises(LoadError) as exc:
        list(walk_source_files(str(missing), [".ara"]))

    assert exc.value.kind is ErrorKind.WALK_FAILED
    assert exc.value.path == str(missing)


def test_walk_unreadable_subdirectory_raises_walk_failed(project: Path) -> None:
    """A listing failure below the top level must not be skipped silently."""
    real_scandir = os.scandir
    blocked = str(project / "src" / "util")

    def flaky_scandir(path):
        if os.fspath(path) == blocked:
            raise PermissionError(13, "Permission denied", blocked)
        return real_scandir(path)

    with patch("os.scandir", side_effect=flaky_scandir):
        with pytest.raises(LoadError) as exc:
            list(walk_source_files(str(project / "src"), [".ara"]))

    assert exc.value.kind is ErrorKind.WALK_FAILED
    assert exc.value.path == blocked
    assert exc.value.reason == "Permission denied"


def test_walk_stat_failure_raises_walk_failed(project: Path) -> None:
    with patch(
        "ara_source.core.services.walker.os.lstat",
        side_effect=FileNotFoundError(2, "No such file or directory"),
    ):
        with pytest.raises(LoadError) as exc:
            list(walk_source_files(str(project / "src"), [".ara"]))

    assert exc.value.kind is ErrorKind.WALK_FAILED
    assert exc.value.path.endswith("a.ara")
