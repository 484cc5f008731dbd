"""High-level category classification for grocery items."""

from collections.abc import Mapping

from pantry_pilot.domain.catalog import (
    AISLE_CATEGORIES,
    CATEGORIES,
    DEFAULT_CATEGORY,
    ITEM_CATEGORIES,
    NAME_KEYWORDS,
    CategoryInfo,
)


def classify(
    store_location: str | None = None,
    category: str | None = None,
    name: str | None = None,
) -> str:
    """Return the high-level category key for an item.

    Resolution order, first match wins: exact aisle, exact category, fuzzy
    category containment, name keywords, then the pantry default.
    """
    if store_location and store_location in AISLE_CATEGORIES:
        return AISLE_CATEGORIES[store_location]

    if category:
        if category in ITEM_CATEGORIES:
            return ITEM_CATEGORIES[category]
        fuzzy = fuzzy_lookup(category, ITEM_CATEGORIES)
        if fuzzy is not None:
            return fuzzy

    if name:
        lowered = name.lower()
        for key, keywords in NAME_KEYWORDS:
            if any(keyword in lowered for keyword in keywords):
                return key

    return DEFAULT_CATEGORY


def category_info(
    store_location: str | None = None,
    category: str | None = None,
    name: str | None = None,
) -> CategoryInfo:
    """Return display info for the item's high-level category."""
    return CATEGORIES[classify(store_location, category, name)]


def fuzzy_lookup(value: str, table: Mapping[str, str]) -> str | None:
    """Return the first table value whose key contains, or is contained in, value."""
    lowered = value.lower()
    for key, result in table.items():
        key_lowered = key.lower()
        if key_lowered in lowered or lowered in key_lowered:
            return result
    return None
