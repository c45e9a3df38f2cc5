"""Search and category filtering over an already-loaded catalog.

Both functions are pure: they never mutate their input and return a fresh
list on every call.
"""

from __future__ import annotations

from typing import List, Sequence

from brandix.modules.catalog.records import TileRecord

ALL_CATEGORIES = "All"


def _matches_category(tile: TileRecord, category: str) -> bool:
    return category == ALL_CATEGORIES or tile.category == category


def _matches_text(tile: TileRecord, needle: str) -> bool:
    # Whitespace is significant; an empty needle matches everything.
    if not needle:
        return True
    return needle in tile.name.lower() or needle in (tile.description or "").lower()


def filter_catalog(
    tiles: Sequence[TileRecord],
    search_text: str = "",
    category: str = ALL_CATEGORIES,
) -> List[TileRecord]:
    """Return the tiles matching both the category and the search text.

    Category comparison is exact and case-sensitive. Search text is matched
    case-insensitively as a substring of the name or the description.
    Relative order of ``tiles`` is preserved.
    """
    needle = (search_text or "").lower()
    return [tile for tile in tiles if _matches_category(tile, category) and _matches_text(tile, needle)]


def distinct_categories(tiles: Sequence[TileRecord]) -> List[str]:
    """``"All"`` followed by each category in first-occurrence order."""
    categories = [ALL_CATEGORIES]
    seen = {ALL_CATEGORIES}
    for tile in tiles:
        if tile.category not in seen:
            seen.add(tile.category)
            categories.append(tile.category)
    return categories
