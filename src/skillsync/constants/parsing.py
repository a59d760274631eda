"""Constants for front matter parsing and validation."""

from __future__ import annotations

import re

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"

SKILL_NAME_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9-]{1,64}")
SKILL_NAME_MAX_LENGTH: int = 64
SKILL_DESCRIPTION_MAX_LENGTH: int = 1024
