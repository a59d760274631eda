"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skillsync.model import PackageDescriptor, SkillRecord


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def vendor_root(fixtures_root: Path) -> Path:
    """Return the fixture packages directory."""
    return fixtures_root / "vendor"


@pytest.fixture()
def make_package(tmp_path: Path) -> Callable[..., PackageDescriptor]:
    """Create a package directory with SKILL.md files and return its descriptor.

    ``files`` maps relative paths to file contents.
    """

    def _make(
        name: str,
        files: dict[str, str],
        *,
        version: str = "1.0.0",
        skill_paths: object = None,
    ) -> PackageDescriptor:
        package_dir = tmp_path / "vendor" / name
        package_dir.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            target = package_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return PackageDescriptor(
            name=name,
            install_path=str(package_dir),
            version=version,
            skill_paths=skill_paths,
        )

    return _make


@pytest.fixture()
def skill_markdown() -> Callable[..., str]:
    """Return a builder for SKILL.md content with the given front matter fields."""

    def _build(name: str, description: str, body: str = "# Skill\n") -> str:
        return f"---\nname: {name}\ndescription: {description}\n---\n{body}"

    return _build


@pytest.fixture()
def make_skill() -> Callable[..., SkillRecord]:
    """Return a SkillRecord builder with defaults for rendering tests."""

    def _make(name: str, description: str = "A skill", location: str = "/vendor/pkg", **overrides: str) -> SkillRecord:
        fields = {
            "source_package": "acme/pkg",
            "source_version": "1.0.0",
            "declaration_file": "SKILL.md",
        }
        fields.update(overrides)
        return SkillRecord(name=name, description=description, location=location, **fields)

    return _make
