"""Hidden-entry filtering and stable listing order."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .types import DirectoryEntry

if TYPE_CHECKING:
    from ..options import ListingOptions


def filter_hidden(entries: Iterable[DirectoryEntry], show_hidden: bool) -> list[DirectoryEntry]:
    """Drop dot-prefixed names unless ``show_hidden`` is set."""
    if show_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.is_hidden]


def _mtime_sort_key(entry: DirectoryEntry) -> tuple[bool, int]:
    # Entries without a timestamp sort after every timestamped entry.
    if entry.mtime_ns is None:
        return (True, 0)
    return (False, -entry.mtime_ns)


def sort_entries(entries: Iterable[DirectoryEntry], sort_by_time: bool) -> list[DirectoryEntry]:
    """Return entries newest-first or by case-insensitive name.

    Both orders rely on ``sorted`` being stable, so ties keep input order.
    """
    if sort_by_time:
        return sorted(entries, key=_mtime_sort_key)
    return sorted(entries, key=lambda entry: entry.name.lower())


def order_entries(entries: Iterable[DirectoryEntry], options: ListingOptions) -> list[DirectoryEntry]:
    """Apply hidden filtering then sorting for one listing run."""
    visible = filter_hidden(entries, options.show_hidden)
    return sort_entries(visible, options.sort_by_time)


__all__ = [
    "filter_hidden",
    "sort_entries",
    "order_entries",
]
