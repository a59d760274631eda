"""Validation of skill front matter fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from skillsync.constants.parsing import (
    SKILL_DESCRIPTION_MAX_LENGTH,
    SKILL_NAME_MAX_LENGTH,
    SKILL_NAME_PATTERN,
)
from skillsync.model import SkillIssue


def validate_frontmatter(frontmatter: Mapping[str, Any]) -> SkillIssue | None:
    """Return the first problem with ``frontmatter``, or ``None`` when valid.

    Checks run in a fixed order: ``name`` present, ``description`` present,
    name format, description length.
    """
    for key in ("name", "description"):
        value = frontmatter.get(key)
        if not isinstance(value, str) or not value.strip():
            return SkillIssue("MissingField", f"Missing required field: '{key}'")

    name: str = frontmatter["name"]
    description: str = frontmatter["description"]

    if SKILL_NAME_PATTERN.fullmatch(name) is None:
        return SkillIssue(
            "InvalidNameFormat",
            f"Invalid name format '{name}'. Must be lowercase letters, numbers, and hyphens only "
            f"(max {SKILL_NAME_MAX_LENGTH} chars).",
        )

    if len(description) > SKILL_DESCRIPTION_MAX_LENGTH:
        return SkillIssue(
            "DescriptionTooLong",
            f"Description exceeds maximum length of {SKILL_DESCRIPTION_MAX_LENGTH} characters "
            f"({len(description)} chars).",
        )

    return None
