"""Short and long listing rendering.

Long lines read ``<type><perms> <size> <mtime> <name>``. The permission triple
comes from the invoking process's access and is repeated for all three
classes; owner/group/other bits are not resolved.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from pygments.console import colorize

from ..listing.types import DirectoryEntry

SIZE_FIELD_WIDTH = 8
DIRECTORY_COLOR = "brightblue"
_MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_type(entry: DirectoryEntry) -> str:
    """Return ``d`` for directories and ``-`` for everything else."""
    return "d" if entry.is_dir else "-"


def format_permissions(entry: DirectoryEntry) -> str:
    """Return the 9-char pseudo-permission field for ``entry``."""
    triple = (
        ("r" if entry.readable else "-")
        + ("w" if entry.writable else "-")
        + ("x" if entry.executable else "-")
    )
    return triple * 3


def format_size(size_bytes: int) -> str:
    """Right-justify ``size_bytes`` in the fixed size column."""
    return f"{size_bytes:>{SIZE_FIELD_WIDTH}d}"


def format_mtime(mtime_ns: int) -> str:
    """Format ``mtime_ns`` as local ``Mon DD HH:MM`` with English month names."""
    stamp = datetime.fromtimestamp(mtime_ns // 1_000_000_000)
    return f"{_MONTH_ABBREVIATIONS[stamp.month - 1]} {stamp:%d %H:%M}"


def display_name(entry: DirectoryEntry, color: bool = False) -> str:
    """Return the entry name, colorized for directories when ``color`` is set."""
    if color and entry.is_dir:
        return colorize(DIRECTORY_COLOR, entry.name)
    return entry.name


def format_long_line(entry: DirectoryEntry, color: bool = False) -> str:
    """Return one long-format row for an entry with complete metadata.

    Raises ``ValueError`` when the entry carries a ``metadata_error``.
    """
    if entry.metadata_error is not None or entry.mtime_ns is None:
        raise ValueError(entry.metadata_error or "modification time unavailable")
    return " ".join(
        (
            format_type(entry) + format_permissions(entry),
            format_size(entry.size_bytes),
            format_mtime(entry.mtime_ns),
            display_name(entry, color),
        )
    )


def render_entries(
    entries: Iterable[DirectoryEntry],
    long_format: bool,
    stdout: TextIO,
    stderr: TextIO,
    color: bool = False,
) -> int:
    """Write one line per entry and return the number of per-entry failures.

    In long format an entry whose details cannot be produced is reported on
    ``stderr`` and skipped; the remaining entries are still rendered.
    """
    failures = 0
    for entry in entries:
        if not long_format:
            stdout.write(display_name(entry, color) + "\n")
            continue
        try:
            line = format_long_line(entry, color)
        except (ValueError, OverflowError, OSError) as exc:
            failures += 1
            stderr.write(f"Error getting file details: {entry.name}: {exc}\n")
            continue
        stdout.write(line + "\n")
    return failures


__all__ = [
    "SIZE_FIELD_WIDTH",
    "format_type",
    "format_permissions",
    "format_size",
    "format_mtime",
    "display_name",
    "format_long_line",
    "render_entries",
]
