"""Frozen dataclasses shared by discovery, rendering and reporting."""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from skillsync.types import JsonObject, SkillIssueKind


@dataclass(frozen=True)
class SkillRecord:
    """A validated skill declaration discovered in an installed package."""

    name: str
    description: str
    location: str
    source_package: str
    source_version: str
    declaration_file: str

    @property
    def declaration_path(self) -> str:
        """Full path of the declaration file."""
        return f"{self.location}/{self.declaration_file}"

    @property
    def base_directory(self) -> str:
        """Directory containing the declaration file, for resolving bundled resources."""
        return posixpath.dirname(self.declaration_path)

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "description": self.description,
            "location": self.location,
            "package": self.source_package,
            "version": self.source_version,
            "file": self.declaration_file,
        }


@dataclass(frozen=True)
class DefaultPath:
    """No override declared; the conventional ``SKILL.md`` at the package root applies."""


@dataclass(frozen=True)
class SinglePath:
    """A single declaration path declared as a string."""

    path: str


@dataclass(frozen=True)
class ManyPaths:
    """Several declaration paths declared as a list."""

    paths: tuple[str, ...]


SkillPathConfig: TypeAlias = DefaultPath | SinglePath | ManyPaths


@dataclass(frozen=True)
class PackageDescriptor:
    """An installed package as supplied by the host environment.

    ``skill_paths`` holds the raw manifest override value untouched; it is
    classified once by :func:`skillsync.scanner.paths.classify_path_config`.
    """

    name: str
    install_path: str
    version: str
    skill_paths: object = None


@dataclass(frozen=True)
class SkillIssue:
    """A record-level problem that causes a declaration to be skipped."""

    kind: SkillIssueKind
    message: str


@dataclass(frozen=True)
class SkillWarning:
    """A record-level problem attributed to the package that caused it."""

    package: str
    kind: SkillIssueKind
    message: str

    def format(self) -> str:
        return f"  [{self.package}] {self.message}"

    def to_dict(self) -> JsonObject:
        return {"package": self.package, "kind": self.kind, "message": self.message}


class WarningLog:
    """Ordered warnings collected during one discovery run."""

    def __init__(self) -> None:
        self._warnings: list[SkillWarning] = []

    def add(self, package: str, kind: SkillIssueKind, message: str) -> None:
        self._warnings.append(SkillWarning(package=package, kind=kind, message=message))

    def __iter__(self) -> Iterator[SkillWarning]:
        return iter(self._warnings)

    def __len__(self) -> int:
        return len(self._warnings)

    def __bool__(self) -> bool:
        return bool(self._warnings)

    def kinds(self) -> list[SkillIssueKind]:
        """Return warning kinds in the order they were recorded."""
        return [warning.kind for warning in self._warnings]

    def by_package(self) -> dict[str, list[SkillWarning]]:
        """Group warnings by package, keeping first-seen package order."""
        grouped: dict[str, list[SkillWarning]] = {}
        for warning in self._warnings:
            grouped.setdefault(warning.package, []).append(warning)
        return grouped


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a discovery run: sorted skills plus the warnings it produced."""

    skills: tuple[SkillRecord, ...]
    warnings: tuple[SkillWarning, ...] = field(default_factory=tuple)

    def find(self, name: str) -> SkillRecord | None:
        """Return the skill with exactly ``name`` (case-sensitive), if any."""
        for skill in self.skills:
            if skill.name == name:
                return skill
        return None

    def to_dict(self) -> JsonObject:
        return {
            "skills": [skill.to_dict() for skill in self.skills],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
