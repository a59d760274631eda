"""Shared exception hierarchy for skillsync."""

from __future__ import annotations

from .base import SkillsyncError
from .config import ConfigError
from .document import DocumentError, DocumentReadError, DocumentRenameError, DocumentWriteError

__all__ = [
    "ConfigError",
    "DocumentError",
    "DocumentReadError",
    "DocumentRenameError",
    "DocumentWriteError",
    "SkillsyncError",
]
