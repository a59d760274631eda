"""Config data model for skillsync runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillsync.constants.config import (
    DEFAULT_DOCUMENT,
    DEFAULT_PACKAGE_GLOBS,
    DEFAULT_PACKAGE_TYPE,
    DEFAULT_PACKAGES_DIR,
)


@dataclass(frozen=True)
class SkillsyncConfig:
    """Resolved skillsync config."""

    packages_dir: str = DEFAULT_PACKAGES_DIR
    document: str = DEFAULT_DOCUMENT
    package_globs: tuple[str, ...] = DEFAULT_PACKAGE_GLOBS
    package_type: str = DEFAULT_PACKAGE_TYPE

    def packages_path(self, root: Path) -> Path:
        """Packages directory, relative paths anchored at ``root``."""
        return root / self.packages_dir

    def document_path(self, root: Path) -> Path:
        """Target document, relative paths anchored at ``root``."""
        return root / self.document
