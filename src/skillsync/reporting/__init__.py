"""Reporting utilities for discovery results."""

from .json_writer import build_skills_payload, render_skills_json
from .stdout import StdoutReporter, render_warnings

__all__ = ["StdoutReporter", "build_skills_payload", "render_skills_json", "render_warnings"]
