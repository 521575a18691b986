# SPDX-License-Identifier: MIT
"""Tests for localize.yaml loading."""

from pathlib import Path

from pagelang.config import default_config, load_config

REPO_CONFIG = Path(__file__).resolve().parent.parent / "localize.yaml"


def _write(tmp_path, text):
    path = tmp_path / "localize.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repo_config_matches_defaults():
    result = load_config(REPO_CONFIG)
    assert result.ok
    assert result.data == default_config()


def test_partial_config_keeps_defaults(tmp_path):
    result = load_config(_write(tmp_path, "language:\n  default: es\n"))
    assert result.ok
    cfg = result.data
    assert cfg.language.default == "es"
    assert cfg.language.request_param == "lang"
    assert cfg.markers.visibility == "autolang"
    assert cfg.storage.key == "lang"


def test_empty_file_is_all_defaults(tmp_path):
    result = load_config(_write(tmp_path, ""))
    assert result.ok
    assert result.data == default_config()


def test_storage_can_be_disabled(tmp_path):
    result = load_config(_write(tmp_path, "storage:\n  path: null\n"))
    assert result.ok
    assert result.data.storage.path is None


def test_missing_file(tmp_path):
    result = load_config(tmp_path / "missing.yaml")
    assert not result.ok
    assert "not found" in result.error


def test_yaml_error(tmp_path):
    result = load_config(_write(tmp_path, "language: [unclosed\n"))
    assert not result.ok
    assert "YAML parse error" in result.error


def test_unknown_marker_key(tmp_path):
    result = load_config(_write(tmp_path, "markers:\n  colour: red\n"))
    assert not result.ok
    assert "Config structure error" in result.error


def test_invalid_default_language(tmp_path):
    result = load_config(_write(tmp_path, "language:\n  default: CAT\n"))
    assert not result.ok
    assert "two lowercase letters" in result.error


def test_environment_vars_must_be_a_list(tmp_path):
    result = load_config(_write(tmp_path, "language:\n  environment_vars: LANG\n"))
    assert not result.ok
    assert "environment_vars" in result.error


def test_skip_tags_must_be_a_list(tmp_path):
    result = load_config(_write(tmp_path, "scan:\n  skip_tags: script\n"))
    assert not result.ok
    assert "skip_tags" in result.error


def test_list_values_accepted(tmp_path):
    text = "language:\n  environment_vars: [LANG]\nscan:\n  skip_tags: [script]\n"
    result = load_config(_write(tmp_path, text))
    assert result.ok
    assert result.data.language.environment_vars == ("LANG",)
    assert result.data.scan.skip_tags == frozenset({"script"})
