"""Usage banner shown for ``-h`` and after an unknown option."""

from __future__ import annotations

from typing import TextIO

USAGE_LINES: tuple[str, ...] = (
    "Usage: advancedls [OPTIONS] [DIRECTORY]",
    "Options:",
    "  -a    Show hidden files",
    "  -l    Use long listing format",
    "  -t    Sort by modification time",
    "  -h    Display this help message",
)


def usage_text() -> str:
    return "\n".join(USAGE_LINES) + "\n"


def print_usage(stream: TextIO) -> None:
    """Write the usage banner to ``stream``."""
    stream.write(usage_text())
