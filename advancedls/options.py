"""Short-option parsing into an immutable listing configuration.

Each ``-xyz`` token is a cluster of single-character flags handled left to
right. Parsing never exits the process: help and invalid input come back as
``ExitRequested`` so only the CLI driver decides how to terminate.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .render.help import print_usage

DEFAULT_TARGET_PATH = "."


@dataclass(frozen=True)
class ListingOptions:
    """Resolved configuration for one listing run."""

    show_hidden: bool = False
    long_format: bool = False
    sort_by_time: bool = False
    target_path: str = DEFAULT_TARGET_PATH


@dataclass(frozen=True)
class ContinueListing:
    """Parser outcome: proceed to listing with ``options``."""

    options: ListingOptions


@dataclass(frozen=True)
class ExitRequested:
    """Parser outcome: stop before listing and exit with ``status``."""

    status: int


ParseOutcome = ContinueListing | ExitRequested

_FLAG_FIELDS: dict[str, str] = {
    "a": "show_hidden",
    "l": "long_format",
    "t": "sort_by_time",
}
_HELP_FLAG = "h"


def parse_arguments(
    argv: list[str],
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> ParseOutcome:
    """Parse raw tokens (without the program name) into a ``ParseOutcome``.

    Flags start off and are switched on only by the characters present. The
    last non-option token becomes ``target_path``. ``-h`` prints usage and
    yields status 0; an unknown flag character reports itself on ``stderr``,
    prints usage and yields status 1. Both stop at the offending character.
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    flags = {field: False for field in _FLAG_FIELDS.values()}
    target_path = DEFAULT_TARGET_PATH

    for token in argv:
        if not token.startswith("-"):
            target_path = token
            continue

        for char in token[1:]:
            if char == _HELP_FLAG:
                print_usage(out)
                return ExitRequested(0)
            field = _FLAG_FIELDS.get(char)
            if field is None:
                err.write(f"Unknown option: {char}\n")
                print_usage(out)
                return ExitRequested(1)
            flags[field] = True

    return ContinueListing(ListingOptions(target_path=target_path, **flags))


__all__ = [
    "DEFAULT_TARGET_PATH",
    "ListingOptions",
    "ContinueListing",
    "ExitRequested",
    "ParseOutcome",
    "parse_arguments",
]
