"""Tests for list/read rendering and warning output."""

from __future__ import annotations

from collections.abc import Callable

from skillsync.model import DiscoveryResult, SkillRecord, SkillWarning
from skillsync.reporting import StdoutReporter, render_warnings


def test_render_list_aligns_columns(make_skill: Callable[..., SkillRecord]) -> None:
    result = DiscoveryResult(
        skills=(
            make_skill("a", source_package="acme/long-package-name", source_version="1.0.0"),
            make_skill("longer-name", source_package="x/y", source_version="2.3.4"),
        )
    )

    output = StdoutReporter(result).render_list()

    assert "  a            acme/long-package-name  1.0.0" in output
    assert "  longer-name  x/y                     2.3.4" in output
    assert "2 skills available. Use 'skillsync read <name>' for details." in output


def test_render_list_singular_summary(make_skill: Callable[..., SkillRecord]) -> None:
    output = StdoutReporter(DiscoveryResult(skills=(make_skill("solo"),))).render_list()

    assert "1 skill available." in output


def test_render_list_empty_registry_prints_notice() -> None:
    output = StdoutReporter(DiscoveryResult(skills=())).render_list()

    assert "No agent skills found in installed packages." in output
    assert "[NOTE]" in output
    assert "available." not in output


def test_render_read_includes_base_directory_and_content(make_skill: Callable[..., SkillRecord]) -> None:
    skill = make_skill(
        "pdf-tools",
        location="/vendor/acme/toolbox",
        source_package="acme-toolbox",
        source_version="0.4.1",
        declaration_file="skills/pdf/SKILL.md",
    )

    output = StdoutReporter(DiscoveryResult(skills=(skill,))).render_read(skill, "# PDF tools")

    assert "Reading: pdf-tools" in output
    assert "Package: acme-toolbox v0.4.1" in output
    assert "Base Directory: /vendor/acme/toolbox/skills/pdf" in output
    assert "# PDF tools\n\nSkill read: pdf-tools" in output


def test_render_not_found_lists_available_skills(make_skill: Callable[..., SkillRecord]) -> None:
    result = DiscoveryResult(
        skills=(make_skill("alpha", source_package="p/a"), make_skill("beta", source_package="p/b"))
    )

    output = StdoutReporter(result).render_not_found("gamma")

    assert "Error: Skill 'gamma' not found" in output
    assert "  - alpha (p/a)" in output
    assert "  - beta (p/b)" in output


def test_render_warnings_groups_by_package() -> None:
    warnings = [
        SkillWarning("pkg/a", "FileNotFound", "first"),
        SkillWarning("pkg/b", "NoFrontMatter", "second"),
        SkillWarning("pkg/a", "DuplicateName", "third"),
    ]

    output = render_warnings(warnings)

    assert output.splitlines() == [
        "",
        "Agent skill warnings:",
        "  [pkg/a]",
        "    - first",
        "    - third",
        "  [pkg/b]",
        "    - second",
    ]


def test_render_warnings_empty() -> None:
    assert render_warnings([]) == ""


def test_color_only_when_requested(make_skill: Callable[..., SkillRecord]) -> None:
    result = DiscoveryResult(skills=())

    assert "\033[" not in StdoutReporter(result).render_not_found("x")
    assert "\033[" in StdoutReporter(result, color=True).render_not_found("x")
