"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

SkillIssueKind: TypeAlias = Literal[
    "AbsolutePathRejected",
    "FileNotFound",
    "NoFrontMatter",
    "MalformedMetadata",
    "InvalidStructure",
    "MissingField",
    "InvalidNameFormat",
    "DescriptionTooLong",
    "DuplicateName",
]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
