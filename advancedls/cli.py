"""Command-line front door for advancedls.

Parses short options, lists the target directory, and renders the result.
This is the only module that turns outcomes into process exit statuses.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .config import load_color_enabled
from .listing import ListingError, list_directory_entries, order_entries
from .options import ExitRequested, ListingOptions, parse_arguments
from .render.listing import render_entries

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
PROGRAM_NAME = "advancedls"
DEBUG_ENV_VAR = "ADVANCEDLS_DEBUG"

logger = logging.getLogger(__name__)


def _configure_logging(stderr: TextIO) -> None:
    """Enable debug logging on ``stderr`` when ``ADVANCEDLS_DEBUG`` is set."""
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            stream=stderr,
            format="%(name)s: %(levelname)s: %(message)s",
        )


def _color_enabled(stdout: TextIO) -> bool:
    """Color only interactive output so piped listings stay plain."""
    isatty = getattr(stdout, "isatty", None)
    if isatty is None or not isatty():
        return False
    return load_color_enabled()


def list_directory(options: ListingOptions, stdout: TextIO, stderr: TextIO) -> int:
    """Run enumeration, ordering and rendering for resolved ``options``.

    Raises ``ListingError`` when the target cannot be listed. Returns the
    number of entries whose details could not be rendered.
    """
    entries = list_directory_entries(options.target_path)
    ordered = order_entries(entries, options)
    return render_entries(
        ordered,
        options.long_format,
        stdout,
        stderr,
        color=_color_enabled(stdout),
    )


def run(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one listing and return its exit status without exiting."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    args = list(sys.argv[1:] if argv is None else argv)

    outcome = parse_arguments(args, stdout=out, stderr=err)
    if isinstance(outcome, ExitRequested):
        return outcome.status

    options = outcome.options
    logger.debug("resolved options: %s", options)
    try:
        failures = list_directory(options, out, err)
    except ListingError as exc:
        err.write(f"{PROGRAM_NAME}: {exc}\n")
        return EXIT_FAILURE
    if failures:
        logger.debug("%d entries could not be rendered in %s", failures, options.target_path)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, list the target directory, and exit.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    """
    _configure_logging(sys.stderr)
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()
