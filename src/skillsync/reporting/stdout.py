"""Human-readable stdout output for listing and reading skills."""

from __future__ import annotations

from collections.abc import Iterable

from skillsync.constants.branding import BRAND_NAME, WARNINGS_TITLE
from skillsync.constants.discovery import MANIFEST_TOOL_NAMESPACE, PACKAGE_TYPE_AI_AGENT_SKILL
from skillsync.constants.reporting import ANSI_CYAN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from skillsync.model import DiscoveryResult, SkillRecord, SkillWarning, WarningLog


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def render_warnings(warnings: Iterable[SkillWarning], *, color: bool = False) -> str:
    """Render warnings grouped by package, or an empty string when there are none."""
    log = _as_log(warnings)
    if not log:
        return ""

    title = _colorize(WARNINGS_TITLE, ANSI_YELLOW) if color else WARNINGS_TITLE
    lines = ["", title]
    for package, package_warnings in log.by_package().items():
        lines.append(f"  [{package}]")
        lines.extend(f"    - {warning.message}" for warning in package_warnings)
    lines.append("")
    return "\n".join(lines)


def _as_log(warnings: Iterable[SkillWarning]) -> WarningLog:
    log = WarningLog()
    for warning in warnings:
        log.add(warning.package, warning.kind, warning.message)
    return log


class StdoutReporter:
    """Formats discovery results for the ``list`` and ``read`` commands."""

    def __init__(self, result: DiscoveryResult, *, color: bool = False) -> None:
        self._result = result
        self._color = color

    def render_list(self) -> str:
        """Render a column-aligned skill table, or a notice when nothing was found."""
        skills = self._result.skills
        if not skills:
            return "\n".join(
                [
                    "",
                    f" {self._tag('[WARNING]', ANSI_YELLOW)} No agent skills found in installed packages.",
                    "",
                    f" {self._tag('[NOTE]', ANSI_CYAN)} Install packages declaring "
                    f'[tool.{MANIFEST_TOOL_NAMESPACE}] type = "{PACKAGE_TYPE_AI_AGENT_SKILL}" to use skills.',
                    "",
                ]
            )

        name_width = max(len(skill.name) for skill in skills)
        package_width = max(len(skill.source_package) for skill in skills)
        lines = ["", "Available Agent Skills:", ""]
        lines.extend(
            f"  {skill.name:<{name_width}}  {skill.source_package:<{package_width}}  {skill.source_version}"
            for skill in skills
        )
        lines.extend(
            [
                "",
                f"{len(skills)} skill{_plural(len(skills))} available. "
                f"Use '{BRAND_NAME} read <name>' for details.",
                "",
            ]
        )
        return "\n".join(lines)

    def render_read(self, skill: SkillRecord, content: str) -> str:
        """Render the header, full declaration text and footer for one skill."""
        body = content if content.endswith("\n") else content + "\n"
        header = "\n".join(
            [
                "",
                f"Reading: {skill.name}",
                f"Package: {skill.source_package} v{skill.source_version}",
                f"Base Directory: {skill.base_directory}",
                "",
                "",
            ]
        )
        return header + body + f"\nSkill read: {skill.name}\n"

    def render_not_found(self, name: str) -> str:
        """Render the miss message plus every available skill for guidance."""
        lines = ["", self._tag(f"Error: Skill '{name}' not found", ANSI_RED), ""]
        if self._result.skills:
            lines.append("Available skills:")
            lines.extend(f"  - {skill.name} ({skill.source_package})" for skill in self._result.skills)
        lines.append("")
        return "\n".join(lines)

    def _tag(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text
