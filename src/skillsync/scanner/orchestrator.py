"""End-to-end skill discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillsync.config import SkillsyncConfig
from skillsync.model import DiscoveryResult, PackageDescriptor, WarningLog
from skillsync.scanner.packages import enumerate_packages
from skillsync.scanner.registry import build_registry

logger = logging.getLogger(__name__)


def discover_skills(packages: Iterable[PackageDescriptor]) -> DiscoveryResult:
    """Discover, validate and deduplicate skills from ``packages``.

    Packages are processed in the order given; for duplicate names the
    skill from the later package is kept, so any ordering guarantee comes
    from whoever enumerates the packages. A fresh warning log is used for
    every call.
    """
    warnings = WarningLog()
    registry = build_registry(packages, warnings)
    skills = registry.records()
    logger.debug("Discovered %d skill(s) with %d warning(s)", len(skills), len(warnings))
    return DiscoveryResult(skills=skills, warnings=tuple(warnings))


def discover_installed_skills(root: Path, config: SkillsyncConfig) -> DiscoveryResult:
    """Discover skills from the packages directory configured for ``root``."""
    packages = enumerate_packages(
        config.packages_path(root),
        config.package_globs,
        config.package_type,
    )
    logger.debug("Found %d %s package(s)", len(packages), config.package_type)
    return discover_skills(packages)
