"""Core data models for skillsync."""

from .entities import (
    DefaultPath,
    DiscoveryResult,
    ManyPaths,
    PackageDescriptor,
    SinglePath,
    SkillIssue,
    SkillPathConfig,
    SkillRecord,
    SkillWarning,
    WarningLog,
)

__all__ = [
    "DefaultPath",
    "DiscoveryResult",
    "ManyPaths",
    "PackageDescriptor",
    "SinglePath",
    "SkillIssue",
    "SkillPathConfig",
    "SkillRecord",
    "SkillWarning",
    "WarningLog",
]
