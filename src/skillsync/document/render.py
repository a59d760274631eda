"""Render discovered skills as the ``<skills_system>`` block."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import escape

from skillsync.constants.document import (
    SKILLS_CONTAINER_CLOSE,
    SKILLS_CONTAINER_OPEN,
    SKILLS_END_MARKER,
    SKILLS_HEADING,
    SKILLS_START_MARKER,
    USAGE_LINES,
    WRAPPER_CLOSE,
    WRAPPER_OPEN,
    XML_ENTITIES,
)
from skillsync.model import SkillRecord
from skillsync.scanner.registry import sort_skills


def render_skills_block(skills: Iterable[SkillRecord]) -> str:
    """Render ``skills`` as the wrapper block, sorted by name.

    The result has no trailing newline; callers decide how it is joined
    with the rest of the document.
    """
    groups = [_render_skill(skill) for skill in sort_skills(skills)]

    lines = [
        WRAPPER_OPEN,
        "",
        SKILLS_HEADING,
        "",
        SKILLS_START_MARKER,
        *USAGE_LINES,
        "",
        SKILLS_CONTAINER_OPEN,
        "",
    ]
    if groups:
        lines.append("\n\n".join(groups))
        lines.append("")
    lines.extend([SKILLS_CONTAINER_CLOSE, SKILLS_END_MARKER, "", WRAPPER_CLOSE])
    return "\n".join(lines)


def _render_skill(skill: SkillRecord) -> str:
    return "\n".join(
        [
            "<skill>",
            f"<name>{_escape(skill.name)}</name>",
            f"<description>{_escape(skill.description)}</description>",
            f"<location>{_escape(skill.location)}</location>",
            "</skill>",
        ]
    )


def _escape(value: str) -> str:
    return escape(value, XML_ENTITIES)
