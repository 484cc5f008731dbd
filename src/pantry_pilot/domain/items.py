"""Domain models for the shared grocery catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class GroceryItem:
    """A purchasable product in the household catalog."""

    id: UUID
    name: str
    category: str
    default_unit: str
    need_to_buy: bool
    in_cart: bool
    store_location: str | None = None
    image_url: str | None = None
    quantity: float | None = None
    unit: str | None = None
    last_updated: datetime | None = None
    updated_by: str | None = None

    @property
    def on_shopping_list(self) -> bool:
        """Return True when the item belongs in the shopping list view."""
        return self.need_to_buy or self.in_cart


@dataclass(frozen=True)
class CartReset:
    """Outcome of clearing the cart."""

    count: int


@dataclass(frozen=True)
class CatalogUpdate:
    """Outcome of a catalog maintenance pass."""

    updated: int
    unchanged: int
