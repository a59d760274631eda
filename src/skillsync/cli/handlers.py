"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import difflib
import sys
from dataclasses import replace
from pathlib import Path

from skillsync.config import SkillsyncConfig, load_config
from skillsync.constants.reporting import OUTPUT_FORMAT_JSON
from skillsync.document import plan_document_update, update_document
from skillsync.exceptions import ConfigError, DocumentError
from skillsync.model import DiscoveryResult
from skillsync.reporting import StdoutReporter, render_skills_json, render_warnings
from skillsync.scanner.orchestrator import discover_installed_skills


def handle_validate_config(args: argparse.Namespace) -> int:
    """Load the configuration and report whether it is valid."""
    try:
        load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_sync(args: argparse.Namespace) -> int:
    """Run discovery and merge the skills block into the target document."""
    root = args.root.resolve()
    try:
        config = _resolve_config(args, root)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.dry_run:
        return _dry_run_sync(root, config, color=_use_color(args))

    result = discover_installed_skills(root, config)
    _emit_warnings(result, color=_use_color(args))

    document = config.document_path(root)
    try:
        update_document(document, result.skills)
    except DocumentError as exc:
        print(f"Document error: {exc}", file=sys.stderr)
        return 1

    count = len(result.skills)
    if count > 0:
        print(f"Agent skills updated: {count} skill{'' if count == 1 else 's'} registered in {document.name}")
    return 0


def handle_list(args: argparse.Namespace) -> int:
    """Print the available skills as a table or JSON payload."""
    result = _discover(args)
    if result is None:
        return 2

    if args.format == OUTPUT_FORMAT_JSON:
        print(render_skills_json(result))
        return 0

    _emit_warnings(result, color=_use_color(args))
    print(StdoutReporter(result, color=_use_color(args)).render_list())
    return 0


def handle_read(args: argparse.Namespace) -> int:
    """Print the declaration file of one skill, or the available names on a miss."""
    result = _discover(args)
    if result is None:
        return 2

    _emit_warnings(result, color=_use_color(args))
    reporter = StdoutReporter(result, color=_use_color(args))
    skill = result.find(args.name)
    if skill is None:
        print(reporter.render_not_found(args.name))
        return 1

    try:
        content = Path(skill.declaration_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Could not read file at {skill.declaration_path}: {exc}", file=sys.stderr)
        return 1

    print(reporter.render_read(skill, content))
    return 0


def build_unified_diff(existing: str | None, updated: str, path: Path) -> str:
    """Return a unified diff from ``existing`` to ``updated`` content."""
    before = (existing or "").splitlines(keepends=True)
    after = updated.splitlines(keepends=True)
    diff = difflib.unified_diff(before, after, fromfile=f"{path} (current)", tofile=f"{path} (updated)")
    return "".join(diff)


def _dry_run_sync(root: Path, config: SkillsyncConfig, *, color: bool) -> int:
    result = discover_installed_skills(root, config)
    _emit_warnings(result, color=color)
    document = config.document_path(root)
    try:
        existing, merged = plan_document_update(document, result.skills)
    except DocumentError as exc:
        print(f"Document error: {exc}", file=sys.stderr)
        return 1

    diff = build_unified_diff(existing, merged, document)
    if diff:
        print(diff, end="" if diff.endswith("\n") else "\n")
    else:
        print(f"{document.name} is already up to date.")
    print(f"# Dry run: no file written. Target: {document}")
    return 0


def _discover(args: argparse.Namespace) -> DiscoveryResult | None:
    root = args.root.resolve()
    try:
        config = _resolve_config(args, root)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None
    return discover_installed_skills(root, config)


def _resolve_config(args: argparse.Namespace, root: Path) -> SkillsyncConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(root, args.config)
    if args.packages_dir is not None:
        config = replace(config, packages_dir=args.packages_dir)
    if getattr(args, "document", None) is not None:
        config = replace(config, document=args.document)
    return config


def _emit_warnings(result: DiscoveryResult, *, color: bool) -> None:
    rendered = render_warnings(result.warnings, color=color)
    if rendered:
        print(rendered, file=sys.stderr)


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()
