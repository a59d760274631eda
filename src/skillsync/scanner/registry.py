"""Skill registry construction from installed package descriptors."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from skillsync.constants.discovery import MANIFEST_SKILLS_KEY_LABEL
from skillsync.model import DefaultPath, PackageDescriptor, SkillIssue, SkillRecord, WarningLog
from skillsync.parsers import parse_front_matter
from skillsync.scanner.paths import classify_path_config, resolve_skill_paths
from skillsync.validation import validate_frontmatter

logger = logging.getLogger(__name__)


class SkillRegistry:
    """Name-keyed collection of skills where the last registration wins."""

    def __init__(self) -> None:
        self._skills: dict[str, SkillRecord] = {}

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, name: object) -> bool:
        return name in self._skills

    def get(self, name: str) -> SkillRecord | None:
        return self._skills.get(name)

    def add(self, record: SkillRecord, warnings: WarningLog) -> None:
        """Register ``record``, replacing and warning about any previous owner of its name."""
        previous = self._skills.get(record.name)
        if previous is not None:
            warnings.add(
                record.source_package,
                "DuplicateName",
                f"Duplicate skill name '{record.name}' found. Previously defined in "
                f"{previous.source_package}. Using skill from {record.source_package} (last one wins).",
            )
        self._skills[record.name] = record

    def records(self) -> tuple[SkillRecord, ...]:
        """Return skills ordered by byte-wise comparison of their names."""
        return sort_skills(self._skills.values())


def sort_skills(skills: Iterable[SkillRecord]) -> tuple[SkillRecord, ...]:
    """Sort skills by name using byte-wise, case-sensitive comparison."""
    return tuple(sorted(skills, key=lambda skill: skill.name.encode("utf-8")))


def build_registry(packages: Iterable[PackageDescriptor], warnings: WarningLog) -> SkillRegistry:
    """Fold packages, in the order supplied, into a registry."""
    registry = SkillRegistry()
    for package in packages:
        for record in discover_package_skills(package, warnings):
            registry.add(record, warnings)
    return registry


def discover_package_skills(package: PackageDescriptor, warnings: WarningLog) -> list[SkillRecord]:
    """Return the valid skills declared by a single package."""
    config = classify_path_config(package.skill_paths)
    relative_paths = resolve_skill_paths(package.name, config, warnings)
    if not relative_paths:
        return []

    install_path = Path(package.install_path)
    location = canonical_location(install_path)
    skills: list[SkillRecord] = []

    for relative_path in relative_paths:
        declaration = install_path / relative_path
        if not declaration.is_file():
            warnings.add(
                package.name,
                "FileNotFound",
                _missing_file_message(relative_path, default=isinstance(config, DefaultPath)),
            )
            continue

        try:
            text = declaration.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            warnings.add(package.name, "FileNotFound", f"Cannot read '{relative_path}': {exc}")
            continue

        result = parse_front_matter(text)
        if isinstance(result, SkillIssue):
            warnings.add(package.name, result.kind, f"In '{relative_path}': {result.message}")
            logger.debug("Skipping %s in %s: %s", relative_path, package.name, result.kind)
            continue

        issue = validate_frontmatter(result)
        if issue is not None:
            warnings.add(package.name, issue.kind, f"Invalid frontmatter in '{relative_path}': {issue.message}")
            logger.debug("Skipping %s in %s: %s", relative_path, package.name, issue.kind)
            continue

        skills.append(
            SkillRecord(
                name=result["name"],
                description=result["description"],
                location=location,
                source_package=package.name,
                source_version=package.version,
                declaration_file=relative_path,
            )
        )

    return skills


def canonical_location(install_path: Path) -> str:
    """Resolve symlinks and relative segments, falling back to the raw path."""
    try:
        resolved = install_path.resolve(strict=True)
    except (OSError, RuntimeError):
        resolved = install_path
    return str(resolved).replace(os.sep, "/")


def _missing_file_message(relative_path: str, *, default: bool) -> str:
    if default:
        return f"SKILL.md not found at '{relative_path}'. Expected SKILL.md in package root (convention)."
    return f"SKILL.md not found at '{relative_path}'. Check '{MANIFEST_SKILLS_KEY_LABEL}' in the package manifest."
