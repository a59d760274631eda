"""Enumeration of installed skill packages from a packages directory.

Each installed package is a directory carrying a ``pyproject.toml``
manifest. A package participates when ``[tool.skillsync] type`` names the
requested capability type; its identifier and version come from the
``[project]`` table, and ``[tool.skillsync] skills`` may override the
declaration paths.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from skillsync.constants.discovery import (
    MANIFEST_SKILLS_KEY,
    MANIFEST_TOOL_NAMESPACE,
    MANIFEST_TYPE_KEY,
)
from skillsync.model import PackageDescriptor

logger = logging.getLogger(__name__)


def enumerate_packages(
    packages_dir: Path,
    package_globs: tuple[str, ...],
    package_type: str,
) -> list[PackageDescriptor]:
    """Return packages of ``package_type`` ordered by manifest path."""
    if not packages_dir.is_dir():
        logger.debug("Packages directory %s does not exist", packages_dir)
        return []

    manifests: set[Path] = set()
    for pattern in package_globs:
        for path in packages_dir.glob(pattern):
            if path.is_file():
                manifests.add(path.absolute())

    packages: list[PackageDescriptor] = []
    for manifest in sorted(manifests, key=lambda path: path.as_posix()):
        descriptor = read_package_manifest(manifest, package_type)
        if descriptor is not None:
            packages.append(descriptor)
    return packages


def read_package_manifest(manifest: Path, package_type: str) -> PackageDescriptor | None:
    """Build a descriptor from ``manifest``, or ``None`` when the package does not qualify."""
    try:
        with manifest.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.debug("Skipping unreadable manifest %s: %s", manifest, exc)
        return None

    tool_config = _table(_table(data.get("tool")).get(MANIFEST_TOOL_NAMESPACE))
    if tool_config.get(MANIFEST_TYPE_KEY) != package_type:
        return None

    project = _table(data.get("project"))
    name = project.get("name")
    version = project.get("version")
    if not isinstance(name, str) or not name or not isinstance(version, str) or not version:
        logger.debug("Skipping %s: manifest lacks project name or version", manifest)
        return None

    return PackageDescriptor(
        name=name,
        install_path=str(manifest.parent),
        version=version,
        skill_paths=tool_config.get(MANIFEST_SKILLS_KEY),
    )


def _table(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}
