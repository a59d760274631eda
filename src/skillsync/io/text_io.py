"""Text read/write helpers with atomic persistence."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from contextlib import suppress
from pathlib import Path

from skillsync.exceptions import DocumentReadError, DocumentRenameError, DocumentWriteError

logger = logging.getLogger(__name__)


def read_text_if_exists(path: Path) -> str | None:
    """Return the UTF-8 content of ``path``, or ``None`` when it does not exist.

    Line endings are kept as stored so untouched regions round-trip exactly.
    """
    if not path.exists():
        return None
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Failed to read document at {path}: {exc}") from exc


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing a sibling temp file then renaming it.

    The target is never opened for writing: it either keeps its previous
    content or is replaced as a whole by ``os.replace``. The replacement keeps
    the permission bits of the existing target, or follows the umask for a new
    file.
    """
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_name, _target_mode(path))
    except OSError as exc:
        _discard(temp_name)
        raise DocumentWriteError(f"Failed to write temporary file for {path}: {exc}") from exc

    assert temp_name is not None
    try:
        os.replace(temp_name, path)
    except OSError as exc:
        _discard(temp_name)
        raise DocumentRenameError(f"Failed to rename temporary file to {path}: {exc}") from exc

    _sync_directory(path.parent)
    logger.debug("Replaced %s atomically", path)


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _sync_directory(directory: Path) -> None:
    # The rename has already happened; a failed flush only loses durability.
    if os.name == "nt":
        return
    try:
        fd = os.open(directory, os.O_RDONLY)
    except OSError as exc:
        logger.debug("Could not open %s for fsync: %s", directory, exc)
        return
    try:
        os.fsync(fd)
    except OSError as exc:
        logger.debug("Could not fsync %s: %s", directory, exc)
    finally:
        os.close(fd)


def _discard(temp_name: str | None) -> None:
    if temp_name:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
