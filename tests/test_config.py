"""Tests for skillsync.yaml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillsync.config import SkillsyncConfig, load_config
from skillsync.exceptions import ConfigError


def test_defaults_when_no_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SkillsyncConfig()
    assert config.packages_dir == "vendor"
    assert config.document == "AGENTS.md"
    assert config.package_type == "ai-agent-skill"


def test_loads_values_from_default_file(tmp_path: Path) -> None:
    (tmp_path / "skillsync.yaml").write_text(
        "packages_dir: third_party\ndocument: docs/AGENTS.md\npackage_globs:\n  - '*/pyproject.toml'\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.packages_dir == "third_party"
    assert config.document == "docs/AGENTS.md"
    assert config.package_globs == ("*/pyproject.toml",)
    assert config.document_path(tmp_path) == tmp_path / "docs" / "AGENTS.md"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / "skillsync.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == SkillsyncConfig()


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "custom.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    (tmp_path / "skillsync.yaml").write_text("document: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(tmp_path)


def test_non_mapping_raises(tmp_path: Path) -> None:
    (tmp_path / "skillsync.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_unknown_key_suggests_closest(tmp_path: Path) -> None:
    (tmp_path / "skillsync.yaml").write_text("packages_dri: vendor\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="did you mean 'packages_dir'"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("document: 5\n", "document must be a non-empty string"),
        ("packages_dir: ''\n", "packages_dir must be a non-empty string"),
        ("package_globs: '*/pyproject.toml'\n", "package_globs must be a list of strings"),
        ("package_globs: []\n", "package_globs must not be empty"),
    ],
)
def test_type_errors_raise(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / "skillsync.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)
