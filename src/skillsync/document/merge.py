"""Find-and-replace-or-append merge of the skills block into a document."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillsync.constants.document import (
    DOCUMENT_TEMP_PREFIX,
    DOCUMENT_TEMP_SUFFIX,
    WRAPPER_CLOSE,
    WRAPPER_OPEN_PREFIX,
)
from skillsync.document.render import render_skills_block
from skillsync.io import read_text_if_exists, write_text_atomic
from skillsync.model import SkillRecord

logger = logging.getLogger(__name__)


def find_skills_block(content: str) -> tuple[int, int] | None:
    """Locate the first ``<skills_system ...>`` ... ``</skills_system>`` span.

    The opening tag may carry any attributes; the span ends at the first
    closing tag after it. Returns ``(start, end)`` offsets or ``None``.
    """
    start = content.find(WRAPPER_OPEN_PREFIX)
    if start == -1:
        return None
    open_end = content.find(">", start + len(WRAPPER_OPEN_PREFIX))
    if open_end == -1:
        return None
    close_start = content.find(WRAPPER_CLOSE, open_end + 1)
    if close_start == -1:
        return None
    return start, close_start + len(WRAPPER_CLOSE)


def merge_skills_block(existing: str | None, block: str) -> str:
    """Return the document content with ``block`` merged into ``existing``."""
    if existing is None:
        return block + "\n"

    span = find_skills_block(existing)
    if span is not None:
        start, end = span
        return existing[:start] + block + existing[end:]

    return existing.rstrip() + "\n\n" + block + "\n"


def plan_document_update(path: Path, skills: Iterable[SkillRecord]) -> tuple[str | None, str]:
    """Return the current and merged content of ``path`` without writing."""
    existing = read_text_if_exists(path)
    return existing, merge_skills_block(existing, render_skills_block(skills))


def update_document(path: Path, skills: Iterable[SkillRecord]) -> str:
    """Merge the rendered skills block into ``path`` and persist it atomically.

    Returns the content that was written.
    """
    _, merged = plan_document_update(path, skills)

    write_text_atomic(
        path=path,
        content=merged,
        temp_prefix=DOCUMENT_TEMP_PREFIX,
        temp_suffix=DOCUMENT_TEMP_SUFFIX,
    )
    logger.info("Updated skills block in %s", path)
    return merged
