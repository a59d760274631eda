"""Tests for JSON Schema validation of the list payload."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from skillsync.config import SkillsyncConfig
from skillsync.constants.reporting import SCHEMA_VERSION
from skillsync.model import DiscoveryResult, SkillRecord
from skillsync.reporting import build_skills_payload, render_skills_json
from skillsync.scanner import discover_installed_skills

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
SKILLS_SCHEMA_PATH: Path = SCHEMAS_DIR / "skills.schema.json"


@pytest.fixture()
def skills_schema() -> dict[str, Any]:
    """Load the skills JSON Schema."""
    return json.loads(SKILLS_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_skills_schema_is_valid_json_schema(skills_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(skills_schema)


def test_fixture_discovery_payload_validates(fixtures_root: Path, skills_schema: dict[str, Any]) -> None:
    result = discover_installed_skills(fixtures_root, SkillsyncConfig())

    payload = json.loads(render_skills_json(result))

    jsonschema.validate(instance=payload, schema=skills_schema)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert [skill["name"] for skill in payload["skills"]] == ["csv-wrangler", "database-analyzer", "pdf-tools"]
    assert {warning["kind"] for warning in payload["warnings"]} == {
        "AbsolutePathRejected",
        "NoFrontMatter",
        "DuplicateName",
    }


def test_empty_payload_validates(skills_schema: dict[str, Any]) -> None:
    payload = build_skills_payload(DiscoveryResult(skills=()))

    jsonschema.validate(instance=payload, schema=skills_schema)
    assert payload["skills"] == []


def test_payload_rejects_invalid_name(skills_schema: dict[str, Any], make_skill: Callable[..., SkillRecord]) -> None:
    payload = build_skills_payload(DiscoveryResult(skills=(make_skill("Not Valid"),)))

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=skills_schema)
