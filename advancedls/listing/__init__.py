"""Directory listing model: entry datatypes, scanning, and ordering.

This package contains the non-rendering stages of one listing run:
- immutable per-child entry records
- single-level filesystem scanning with per-entry stat capture
- hidden filtering and name/mtime ordering
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import ListingError, entry_from_dir_entry, list_directory_entries
from .ordering import filter_hidden, order_entries, sort_entries

__all__ = [
    "DirectoryEntry",
    "ListingError",
    "entry_from_dir_entry",
    "list_directory_entries",
    "filter_hidden",
    "sort_entries",
    "order_entries",
]
