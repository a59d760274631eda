"""Constants for package enumeration and skill path resolution."""

from __future__ import annotations

import re

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
PACKAGE_MANIFEST_FILENAME: str = "pyproject.toml"
PACKAGE_TYPE_AI_AGENT_SKILL: str = "ai-agent-skill"

# Manifest namespace: [tool.skillsync] type / skills
MANIFEST_TOOL_NAMESPACE: str = "skillsync"
MANIFEST_TYPE_KEY: str = "type"
MANIFEST_SKILLS_KEY: str = "skills"
MANIFEST_SKILLS_KEY_LABEL: str = f"tool.{MANIFEST_TOOL_NAMESPACE}.{MANIFEST_SKILLS_KEY}"

DRIVE_LETTER_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z]:")
