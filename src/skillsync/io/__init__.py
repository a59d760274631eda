"""Shared file I/O helpers."""

from .text_io import read_text_if_exists, write_text_atomic

__all__ = ["read_text_if_exists", "write_text_atomic"]
