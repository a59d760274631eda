"""Tests for declaration path classification and resolution."""

from __future__ import annotations

import pytest

from skillsync.model import DefaultPath, ManyPaths, SinglePath, WarningLog
from skillsync.scanner.paths import classify_path_config, is_absolute_path, resolve_skill_paths


@pytest.mark.parametrize("raw", [None, 42, 3.5, True, {"path": "SKILL.md"}])
def test_classify_unsupported_values_fall_back_to_default(raw: object) -> None:
    assert classify_path_config(raw) == DefaultPath()


def test_classify_string_is_single_path() -> None:
    assert classify_path_config("skills/pdf/SKILL.md") == SinglePath("skills/pdf/SKILL.md")


def test_classify_list_keeps_only_strings() -> None:
    config = classify_path_config(["a/SKILL.md", 7, None, "b/SKILL.md", ["nested"]])

    assert config == ManyPaths(("a/SKILL.md", "b/SKILL.md"))


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/etc/SKILL.md", True),
        ("\\share\\SKILL.md", True),
        ("C:\\skills\\SKILL.md", True),
        ("c:/skills/SKILL.md", True),
        ("skills/SKILL.md", False),
        ("./SKILL.md", False),
        ("../other/SKILL.md", False),
        ("SKILL.md", False),
    ],
)
def test_is_absolute_path(path: str, expected: bool) -> None:
    assert is_absolute_path(path) is expected


def test_default_config_resolves_to_conventional_file() -> None:
    warnings = WarningLog()

    assert resolve_skill_paths("acme/pkg", DefaultPath(), warnings) == ["SKILL.md"]
    assert not warnings


def test_single_absolute_path_is_rejected_with_warning() -> None:
    warnings = WarningLog()

    paths = resolve_skill_paths("acme/pkg", SinglePath("/abs/SKILL.md"), warnings)

    assert paths == []
    assert warnings.kinds() == ["AbsolutePathRejected"]
    warning = next(iter(warnings))
    assert warning.package == "acme/pkg"
    assert "/abs/SKILL.md" in warning.message


def test_many_paths_keep_order_and_drop_absolute_entries() -> None:
    warnings = WarningLog()
    config = ManyPaths(("b/SKILL.md", "C:/x/SKILL.md", "a/SKILL.md", "/y/SKILL.md"))

    paths = resolve_skill_paths("acme/pkg", config, warnings)

    assert paths == ["b/SKILL.md", "a/SKILL.md"]
    assert warnings.kinds() == ["AbsolutePathRejected", "AbsolutePathRejected"]


def test_empty_list_resolves_to_no_candidates() -> None:
    warnings = WarningLog()

    assert resolve_skill_paths("acme/pkg", classify_path_config([]), warnings) == []
    assert not warnings
