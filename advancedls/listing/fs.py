"""Filesystem scanning for the immediate children of one directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import DirectoryEntry

logger = logging.getLogger(__name__)


class ListingError(Exception):
    """Raised when a target path cannot be listed as a directory."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot access '{path}': {reason}")


def _describe_os_error(exc: OSError) -> str:
    """Return the short OS message for ``exc`` without errno/path noise."""
    return exc.strerror or str(exc)


def _access_flags(path: str) -> tuple[bool, bool, bool]:
    """Return ``(readable, writable, executable)`` for the current process."""
    return (
        os.access(path, os.R_OK),
        os.access(path, os.W_OK),
        os.access(path, os.X_OK),
    )


def entry_from_dir_entry(child: os.DirEntry) -> DirectoryEntry:
    """Build one ``DirectoryEntry`` from a scandir row.

    Symlinks are followed for type, size and mtime. A failing ``stat`` is
    recorded on the entry instead of raised.
    """
    try:
        is_dir = child.is_dir()
    except OSError:
        is_dir = False

    readable, writable, executable = _access_flags(child.path)
    try:
        stat = child.stat()
    except OSError as exc:
        logger.debug("stat failed for %s: %s", child.path, exc)
        return DirectoryEntry(
            name=child.name,
            path=Path(child.path),
            is_dir=is_dir,
            readable=readable,
            writable=writable,
            executable=executable,
            metadata_error=_describe_os_error(exc),
        )

    return DirectoryEntry(
        name=child.name,
        path=Path(child.path),
        is_dir=is_dir,
        size_bytes=max(0, int(stat.st_size)),
        mtime_ns=int(stat.st_mtime_ns),
        readable=readable,
        writable=writable,
        executable=executable,
    )


def list_directory_entries(directory: Path | str) -> list[DirectoryEntry]:
    """List the immediate children of ``directory`` in filesystem order.

    Raises ``ListingError`` when the path is missing, is not a directory, or
    cannot be enumerated.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as iterator:
            for child in iterator:
                entries.append(entry_from_dir_entry(child))
    except OSError as exc:
        raise ListingError(directory, _describe_os_error(exc)) from exc

    logger.debug("scanned %d entries in %s", len(entries), directory)
    return entries


__all__ = [
    "ListingError",
    "entry_from_dir_entry",
    "list_directory_entries",
]
