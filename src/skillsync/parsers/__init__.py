"""Parsers for skill declaration files."""

from .frontmatter import parse_front_matter, split_front_matter

__all__ = ["parse_front_matter", "split_front_matter"]
