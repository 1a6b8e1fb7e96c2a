from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion outside strict mode.
3. Strict mode validation.
"""

import pytest

from ara_source.core.services.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["extensions"] == [".ara"]
    assert cfg["workers"] == 1
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults_without_warnings() -> None:
    cfg, warnings = validate_config({})

    assert cfg["encoding"] == "utf-8"
    assert cfg["definition_suffix"] == ".d.ara"
    assert warnings == []


def test_validate_corrects_extension_dots_and_duplicates() -> None:
    cfg, warnings = validate_config({"extensions": ["ara", ".ara", " .inc "]})

    assert cfg["extensions"] == [".ara", ".inc"]
    assert any("corrected" in w for w in warnings)


def test_validate_accepts_csv_extensions() -> None:
    cfg, warnings = validate_config({"extensions": ".ara,.inc"})
    assert cfg["extensions"] == [".ara", ".inc"]
    assert any("CSV" in w for w in warnings)


def test_validate_empty_extension_list_falls_back() -> None:
    cfg, _ = validate_config({"extensions": []})
    assert cfg["extensions"] == [".ara"]


def test_validate_workers_coercion() -> None:
    cfg, warnings = validate_config({"workers": "4"})
    assert cfg["workers"] == 4
    assert warnings

    cfg, warnings = validate_config({"workers": 0})
    assert cfg["workers"] == 1
    assert warnings

    cfg, _ = validate_config({"workers": True})
    assert cfg["workers"] == 1


def test_validate_ignores_unknown_keys() -> None:
    cfg, warnings = validate_config({"input_path": "/tmp"})
    assert "input_path" not in cfg
    assert any("input_path" in w for w in warnings)


def test_validate_strict_type_error() -> None:
    with pytest.raises(TypeError):
        validate_config({"workers": "4"}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"extensions": ".ara"}, strict=True)

    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)


def test_validate_strict_value_error() -> None:
    with pytest.raises(ValueError):
        validate_config({"extensions": ["ara"]}, strict=True)

    with pytest.raises(ValueError):
        validate_config({"workers": 0}, strict=True)

    with pytest.raises(ValueError):
        validate_config({"bogus": 1}, strict=True)
