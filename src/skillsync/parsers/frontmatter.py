"""Parser for YAML front matter at the top of SKILL.md files."""

from __future__ import annotations

from typing import Any

import yaml

from skillsync.constants.parsing import BYTE_ORDER_MARK, FRONTMATTER_DELIMITER
from skillsync.model import SkillIssue


def split_front_matter(text: str) -> str | None:
    """Return the raw text between the opening and closing ``---`` lines.

    The opening delimiter must be the first line of the file; the block ends
    at the first following delimiter line. Returns ``None`` when either is
    missing.
    """
    lines = text.lstrip(BYTE_ORDER_MARK).splitlines()
    if not lines or not _is_delimiter(lines[0]):
        return None

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            return "\n".join(lines[1:index])
    return None


def parse_front_matter(text: str) -> dict[str, Any] | SkillIssue:
    """Parse the front matter of a declaration file into a mapping.

    Failures are returned as a :class:`SkillIssue` rather than raised so the
    caller can record a warning and move on to the next file.
    """
    block = split_front_matter(text)
    if block is None:
        return SkillIssue("NoFrontMatter", "No YAML frontmatter found.")

    try:
        payload = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        return SkillIssue("MalformedMetadata", f"Malformed YAML: {exc}")

    if not isinstance(payload, dict):
        return SkillIssue("InvalidStructure", "Expected a YAML mapping.")
    return payload


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER
