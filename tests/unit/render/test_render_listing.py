"""Short and long listing rendering tests.

Long-format expectations build timestamps from local datetimes so the date
field is stable across time zones.
"""

from __future__ import annotations

import io
import unittest
from datetime import datetime
from pathlib import Path

from advancedls.listing import DirectoryEntry
from advancedls.render.listing import (
    format_long_line,
    format_mtime,
    format_permissions,
    format_size,
    render_entries,
)


def _local_ns(*parts: int) -> int:
    return int(datetime(*parts).timestamp()) * 1_000_000_000


def _entry(
    name: str,
    *,
    is_dir: bool = False,
    size_bytes: int = 0,
    mtime_ns: int | None = None,
    access: str = "rw-",
    metadata_error: str | None = None,
) -> DirectoryEntry:
    return DirectoryEntry(
        name=name,
        path=Path(name),
        is_dir=is_dir,
        size_bytes=size_bytes,
        mtime_ns=_local_ns(2024, 1, 5, 14, 32) if mtime_ns is None and metadata_error is None else mtime_ns,
        readable=access[0] == "r",
        writable=access[1] == "w",
        executable=access[2] == "x",
        metadata_error=metadata_error,
    )


class LongFormatFieldTests(unittest.TestCase):
    def test_permissions_repeat_one_triple_three_times(self) -> None:
        cases = {
            "rwx": "rwxrwxrwx",
            "rw-": "rw-rw-rw-",
            "r-x": "r-xr-xr-x",
            "---": "---------",
        }
        for access, expected in cases.items():
            with self.subTest(access=access):
                perms = format_permissions(_entry("f", access=access))
                self.assertEqual(perms, expected)
                self.assertEqual(len(perms), 9)
                self.assertEqual(perms[:3] * 3, perms)

    def test_size_is_right_justified_in_eight_columns(self) -> None:
        self.assertEqual(format_size(0), "       0")
        self.assertEqual(format_size(1234), "    1234")
        self.assertEqual(format_size(123456789), "123456789")

    def test_mtime_uses_abbreviated_month_and_zero_padded_fields(self) -> None:
        self.assertEqual(format_mtime(_local_ns(2024, 1, 5, 14, 32)), "Jan 05 14:32")
        self.assertEqual(format_mtime(_local_ns(2023, 12, 31, 3, 7, 59)), "Dec 31 03:07")

    def test_long_line_joins_fields_with_single_spaces(self) -> None:
        line = format_long_line(_entry("notes.txt", size_bytes=42, access="rw-"))
        self.assertEqual(line, "-rw-rw-rw-       42 Jan 05 14:32 notes.txt")

        directory_line = format_long_line(_entry("src", is_dir=True, size_bytes=4096, access="rwx"))
        self.assertEqual(directory_line, "drwxrwxrwx     4096 Jan 05 14:32 src")

    def test_long_line_rejects_entry_with_metadata_error(self) -> None:
        with self.assertRaises(ValueError):
            format_long_line(_entry("gone", metadata_error="No such file or directory"))


class RenderEntriesTests(unittest.TestCase):
    def test_short_format_writes_bare_names(self) -> None:
        stdout = io.StringIO()
        stderr = io.StringIO()

        failures = render_entries([_entry("a"), _entry("B")], False, stdout, stderr)

        self.assertEqual(failures, 0)
        self.assertEqual(stdout.getvalue(), "a\nB\n")
        self.assertEqual(stderr.getvalue(), "")

    def test_short_format_still_lists_entries_with_metadata_errors(self) -> None:
        stdout = io.StringIO()
        stderr = io.StringIO()

        render_entries([_entry("gone", metadata_error="boom")], False, stdout, stderr)

        self.assertEqual(stdout.getvalue(), "gone\n")
        self.assertEqual(stderr.getvalue(), "")

    def test_long_format_reports_bad_entry_and_continues(self) -> None:
        stdout = io.StringIO()
        stderr = io.StringIO()
        entries = [
            _entry("first", size_bytes=1),
            _entry("gone", metadata_error="No such file or directory"),
            _entry("last", size_bytes=2),
        ]

        failures = render_entries(entries, True, stdout, stderr)

        self.assertEqual(failures, 1)
        self.assertEqual(
            stdout.getvalue().splitlines(),
            [
                "-rw-rw-rw-        1 Jan 05 14:32 first",
                "-rw-rw-rw-        2 Jan 05 14:32 last",
            ],
        )
        self.assertEqual(
            stderr.getvalue(),
            "Error getting file details: gone: No such file or directory\n",
        )

    def test_color_highlights_only_directory_names(self) -> None:
        stdout = io.StringIO()

        render_entries([_entry("dir", is_dir=True), _entry("file")], False, stdout, io.StringIO(), color=True)

        dir_line, file_line = stdout.getvalue().splitlines()
        self.assertIn("\x1b[", dir_line)
        self.assertIn("dir", dir_line)
        self.assertEqual(file_line, "file")


if __name__ == "__main__":
    unittest.main()
