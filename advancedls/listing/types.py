"""Domain datatypes for one listed directory child."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate directory child with metadata observed at scan time.

    ``readable``/``writable``/``executable`` reflect the invoking process's
    access, not the owner/group/other mode bits. ``metadata_error`` is set when
    the child could not be stat-ed; size and timestamp are then placeholders.
    """

    name: str
    path: Path
    is_dir: bool
    size_bytes: int = 0
    mtime_ns: int | None = None
    readable: bool = False
    writable: bool = False
    executable: bool = False
    metadata_error: str | None = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


__all__ = ["DirectoryEntry"]
