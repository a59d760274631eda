"""Configuration defaults and filenames."""

from __future__ import annotations

from skillsync.constants.discovery import PACKAGE_MANIFEST_FILENAME, PACKAGE_TYPE_AI_AGENT_SKILL
from skillsync.constants.document import DEFAULT_DOCUMENT_FILENAME

CONFIG_FILENAME: str = "skillsync.yaml"

DEFAULT_PACKAGES_DIR: str = "vendor"
DEFAULT_DOCUMENT: str = DEFAULT_DOCUMENT_FILENAME
DEFAULT_PACKAGE_GLOBS: tuple[str, ...] = (f"*/{PACKAGE_MANIFEST_FILENAME}", f"*/*/{PACKAGE_MANIFEST_FILENAME}")
DEFAULT_PACKAGE_TYPE: str = PACKAGE_TYPE_AI_AGENT_SKILL

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"packages_dir", "document", "package_globs", "package_type"})
