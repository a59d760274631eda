"""Configuration loading and validation for skillsync runs."""

from __future__ import annotations

from skillsync.config.loader import load_config
from skillsync.config.model import SkillsyncConfig

__all__ = ["SkillsyncConfig", "load_config"]
