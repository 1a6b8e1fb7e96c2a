from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates typed-input expansion, canonicalization, containment checks and logical
path normalization.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from ara_source.infra import fs
from ara_source.infra.fs import canonical_path, expand_user_input, is_within, to_logical_path


def test_expand_user_input_env_and_home() -> None:
    with patch.dict(os.environ, {"ARA_VENDOR": "third_party"}):
        assert expand_user_input("$ARA_VENDOR/foo") == "third_party/foo"

    with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
        assert "code" in Path(expand_user_input("~/code")).parts


def test_expand_user_input_keeps_whitespace() -> None:
    assert expand_user_input(" lib ") == " lib "


def test_canonical_path_anchors_relative_at_working_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "lib ").mkdir()
    monkeypatch.chdir(tmp_path)
    assert canonical_path("lib ") == os.path.realpath(str(tmp_path / "lib "))


def test_canonical_path_resolves_dot_segments(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    messy = os.path.join(str(tmp_path), "a", "..", "a")
    assert canonical_path(messy) == os.path.realpath(str(tmp_path / "a"))


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_canonical_path_resolves_symlinks(tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(str(target), str(link), target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert canonical_path(str(link)) == os.path.realpath(str(target))


def test_is_within_compares_whole_segments(tmp_path: Path) -> None:
    root = os.path.join(str(tmp_path), "proj")
    assert is_within(os.path.join(root, "src", "a.ara"), root)
    assert is_within(root, root)
    assert not is_within(os.path.join(str(tmp_path), "proj-extra", "a.ara"), root)
    assert not is_within(str(tmp_path), root)


def test_to_logical_path_posix(tmp_path: Path) -> None:
    root = str(tmp_path)
    path = os.path.join(root, "vendor", "foo", "b.ara")
    assert to_logical_path(path, root) == "vendor/foo/b.ara"


def test_to_logical_path_normalizes_backslashes() -> None:
    with patch.object(fs.os, "sep", "\\"), \
            patch.object(fs.os.path, "relpath", return_value="vendor\\foo\\b.ara"):
        assert to_logical_path("C:\\proj\\vendor\\foo\\b.ara", "C:\\proj") == "vendor/foo/b.ara"
