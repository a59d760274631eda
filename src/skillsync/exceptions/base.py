"""Base exception type for skillsync."""

from __future__ import annotations


class SkillsyncError(Exception):
    """Base class for all errors raised by skillsync."""
