"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillsync"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: register agent skills from installed packages in AGENTS.md"
WARNINGS_TITLE: str = "Agent skill warnings:"
