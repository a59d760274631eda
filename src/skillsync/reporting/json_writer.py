"""JSON payload for ``skillsync list --format json``."""

from __future__ import annotations

import json

from skillsync.constants.reporting import SCHEMA_VERSION
from skillsync.model import DiscoveryResult
from skillsync.types import JsonObject


def build_skills_payload(result: DiscoveryResult) -> JsonObject:
    """Serialize a discovery result for machine consumption."""
    return {"schema_version": SCHEMA_VERSION, **result.to_dict()}


def render_skills_json(result: DiscoveryResult) -> str:
    return json.dumps(build_skills_payload(result), indent=2, sort_keys=True)
