"""Store aisle and department resolution for grocery items."""

from dataclasses import dataclass, field, replace

from pantry_pilot.domain.catalog import (
    DEFAULT_AISLE,
    DEFAULT_AISLES,
    STORE_LOCATIONS,
    OnNoMatch,
    StoreLocationTable,
)
from pantry_pilot.domain.items import GroceryItem
from pantry_pilot.services.classifier import classify, fuzzy_lookup


@dataclass(frozen=True)
class StoreLocationResolver:
    """Maps an item's name and category to a store location label."""

    on_no_match: OnNoMatch = OnNoMatch.LEAVE_UNSET
    table: StoreLocationTable = field(default=STORE_LOCATIONS)

    def resolve(self, name: str | None, category: str | None) -> str | None:
        """Return the store location for an item, or None when left unset."""
        if name and name in self.table.names:
            return self.table.names[name]
        if category and category in self.table.categories:
            return self.table.categories[category]
        if name:
            by_name = fuzzy_lookup(name, self.table.names)
            if by_name is not None:
                return by_name
        if category:
            by_category = fuzzy_lookup(category, self.table.categories)
            if by_category is not None:
                return by_category

        if self.on_no_match is OnNoMatch.LEAVE_UNSET:
            return None
        high_level = classify(None, category, name)
        return DEFAULT_AISLES.get(high_level, DEFAULT_AISLE)

    def assign(self, item: GroceryItem) -> GroceryItem:
        """Return the item with a store location filled in when it has none."""
        if item.store_location:
            return item
        location = self.resolve(item.name, item.category)
        if location is None:
            return item
        return replace(item, store_location=location)
