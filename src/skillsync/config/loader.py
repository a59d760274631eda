"""Config loading and normalization for skillsync runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skillsync.config.model import SkillsyncConfig
from skillsync.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_DOCUMENT,
    DEFAULT_PACKAGE_GLOBS,
    DEFAULT_PACKAGE_TYPE,
    DEFAULT_PACKAGES_DIR,
)
from skillsync.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SkillsyncConfig:
    """Load and validate config from ``skillsync.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillsyncConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        hints = [_suggest_key(key) for key in unknown]
        details = ", ".join(f"{key} ({hint})" if hint else key for key, hint in zip(unknown, hints, strict=True))
        raise ConfigError(f"Unknown config key(s) in {path}: {details}")

    package_globs = _ensure_string_list(raw.get("package_globs", list(DEFAULT_PACKAGE_GLOBS)), "package_globs")
    if not package_globs:
        raise ConfigError("package_globs must not be empty")

    return SkillsyncConfig(
        packages_dir=_ensure_string(raw.get("packages_dir", DEFAULT_PACKAGES_DIR), "packages_dir"),
        document=_ensure_string(raw.get("document", DEFAULT_DOCUMENT), "document"),
        package_globs=tuple(package_globs),
        package_type=_ensure_string(raw.get("package_type", DEFAULT_PACKAGE_TYPE), "package_type"),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item for item in value if item.strip()]


def _suggest_key(key: str) -> str:
    matches = difflib.get_close_matches(key, sorted(CONFIG_ALLOWED_KEYS), n=1)
    return f"did you mean '{matches[0]}'?" if matches else ""
