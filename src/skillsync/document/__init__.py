"""Rendering and merging of the skills block in AGENTS.md."""

from .merge import find_skills_block, merge_skills_block, plan_document_update, update_document
from .render import render_skills_block

__all__ = [
    "find_skills_block",
    "merge_skills_block",
    "plan_document_update",
    "render_skills_block",
    "update_document",
]
