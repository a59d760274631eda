"""Shared type aliases for skillsync."""

from .common import JsonObject, JsonScalar, JsonValue, SkillIssueKind

__all__ = ["JsonObject", "JsonScalar", "JsonValue", "SkillIssueKind"]
