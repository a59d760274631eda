"""Constants for the rendered AGENTS.md skills block."""

from __future__ import annotations

DEFAULT_DOCUMENT_FILENAME: str = "AGENTS.md"
DOCUMENT_TEMP_PREFIX: str = ".skillsync-"
DOCUMENT_TEMP_SUFFIX: str = ".tmp"

WRAPPER_TAG: str = "skills_system"
WRAPPER_OPEN: str = f'<{WRAPPER_TAG} priority="1">'
WRAPPER_OPEN_PREFIX: str = f"<{WRAPPER_TAG}"
WRAPPER_CLOSE: str = f"</{WRAPPER_TAG}>"

SKILLS_HEADING: str = "## Available Skills"
SKILLS_START_MARKER: str = "<!-- SKILLS_TABLE_START -->"
SKILLS_END_MARKER: str = "<!-- SKILLS_TABLE_END -->"

SKILLS_CONTAINER_OPEN: str = "<available_skills>"
SKILLS_CONTAINER_CLOSE: str = "</available_skills>"

USAGE_LINES: tuple[str, ...] = (
    "<usage>",
    "When users ask you to perform tasks, check if any of the available skills below can help complete "
    "the task more effectively. Skills provide specialized capabilities and domain knowledge.",
    "",
    "How to use skills:",
    '- Invoke: Bash("skillsync read <skill-name>")',
    "- The skill content will load with detailed instructions on how to complete the task",
    "- Base directory provided in output for resolving bundled resources (references/, scripts/, assets/)",
    "",
    "Usage notes:",
    "- Only use skills listed in <available_skills> below",
    "- Do not invoke a skill that is already loaded in your context",
    "- Each skill invocation is stateless",
    "</usage>",
)

XML_ENTITIES: dict[str, str] = {'"': "&quot;", "'": "&apos;"}
