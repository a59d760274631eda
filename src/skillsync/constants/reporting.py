"""Reporting constants for stdout and JSON output."""

from __future__ import annotations

SCHEMA_VERSION: str = "1"

OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})

ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"
