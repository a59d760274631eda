"""Declaration path resolution for installed skill packages."""

from __future__ import annotations

from skillsync.constants.discovery import (
    DRIVE_LETTER_PATTERN,
    MANIFEST_SKILLS_KEY_LABEL,
    SKILL_MARKDOWN_FILENAME,
)
from skillsync.model import DefaultPath, ManyPaths, SinglePath, SkillPathConfig, WarningLog


def classify_path_config(raw: object) -> SkillPathConfig:
    """Turn a raw manifest override into a tagged path configuration.

    Unsupported value types fall back to the default convention. Non-string
    list entries are dropped here so later stages only ever see strings.
    """
    if isinstance(raw, str):
        return SinglePath(raw)
    if isinstance(raw, (list, tuple)):
        return ManyPaths(tuple(item for item in raw if isinstance(item, str)))
    return DefaultPath()


def is_absolute_path(path: str) -> bool:
    """Return True for POSIX roots, backslash roots and Windows drive paths."""
    return path.startswith(("/", "\\")) or DRIVE_LETTER_PATTERN.match(path) is not None


def resolve_skill_paths(package: str, config: SkillPathConfig, warnings: WarningLog) -> list[str]:
    """Return relative declaration paths for ``package`` in declaration order."""
    if isinstance(config, DefaultPath):
        return [SKILL_MARKDOWN_FILENAME]

    candidates = [config.path] if isinstance(config, SinglePath) else list(config.paths)
    resolved: list[str] = []
    for candidate in candidates:
        if is_absolute_path(candidate):
            warnings.add(
                package,
                "AbsolutePathRejected",
                f"Absolute path '{candidate}' not allowed in '{MANIFEST_SKILLS_KEY_LABEL}'. "
                "Use relative paths from package root.",
            )
            continue
        resolved.append(candidate)
    return resolved
