"""CLI entrypoint for skillsync."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillsync import __version__
from skillsync.cli.handlers import handle_list, handle_read, handle_sync, handle_validate_config
from skillsync.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from skillsync.constants.reporting import OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: cwd)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-p", "--packages-dir", default=None, help="Directory holding installed packages")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Register discovered skills in AGENTS.md")
    _add_common_arguments(sync)
    sync.add_argument("-d", "--document", default=None, help="Target document (default: AGENTS.md)")
    sync.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print a diff of the document change without writing it",
    )

    list_parser = subparsers.add_parser("list", help="List available agent skills")
    _add_common_arguments(list_parser)
    list_parser.add_argument(
        "-f",
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=OUTPUT_FORMAT_TEXT,
        help="Output format (default: text)",
    )

    read = subparsers.add_parser("read", help="Print the full SKILL.md content of a skill")
    _add_common_arguments(read)
    read.add_argument("name", help="The name of the skill to read")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without discovery")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: cwd)")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "sync":
        return handle_sync(args)
    if args.command == "list":
        return handle_list(args)
    if args.command == "read":
        return handle_read(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
