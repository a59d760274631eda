"""Document I/O exceptions.

These abort a merge. Per-skill problems are never raised; they are reported
as :class:`skillsync.model.SkillWarning` values instead.
"""

from __future__ import annotations

from skillsync.exceptions.base import SkillsyncError


class DocumentError(SkillsyncError, OSError):
    """Raised when the target document cannot be read or persisted."""


class DocumentReadError(DocumentError):
    """Raised when the existing document cannot be read."""


class DocumentWriteError(DocumentError):
    """Raised when the temporary document file cannot be written."""


class DocumentRenameError(DocumentError):
    """Raised when the temporary file cannot replace the target document."""
