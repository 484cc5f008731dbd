"""Grouping and ordering of the shopping list for display."""

from dataclasses import dataclass

from pantry_pilot.domain.catalog import CATEGORIES, CategoryInfo
from pantry_pilot.domain.items import GroceryItem
from pantry_pilot.services.classifier import classify


@dataclass(frozen=True)
class CategoryGroup:
    """Items sharing a high-level category, in walking order."""

    info: CategoryInfo
    items: list[GroceryItem]


@dataclass(frozen=True)
class ShoppingSplit:
    """The still-to-buy and already-carted halves of the list."""

    to_buy: list[GroceryItem]
    in_cart: list[GroceryItem]


def group_by_category(items: list[GroceryItem]) -> list[CategoryGroup]:
    """Group items by high-level category, ordered by aisle then name."""
    buckets: dict[str, list[GroceryItem]] = {key: [] for key in CATEGORIES}
    for item in items:
        key = classify(item.store_location, item.category, item.name)
        buckets[key].append(item)
    return [
        CategoryGroup(info=CATEGORIES[key], items=sorted(bucket, key=walking_order))
        for key, bucket in buckets.items()
        if bucket
    ]


def split_list_and_cart(items: list[GroceryItem]) -> ShoppingSplit:
    """Partition the shopping view into wanted and carted items."""
    ordered = sorted(items, key=lambda item: item.name.lower())
    return ShoppingSplit(
        to_buy=[item for item in ordered if item.need_to_buy],
        in_cart=[item for item in ordered if item.in_cart],
    )


def walking_order(item: GroceryItem) -> tuple[int, int, str, str]:
    """Sort key: numbered aisles first, then departments, then unplaced items."""
    location = item.store_location
    name = item.name.lower()
    if not location:
        return (2, 0, "", name)
    if location.isdigit():
        return (0, int(location), "", name)
    return (1, 0, location.lower(), name)
