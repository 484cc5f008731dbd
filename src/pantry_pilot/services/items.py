"""Grocery catalog and shopping cart services."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from pantry_pilot.domain.errors import BackendFailure, NotFoundError, ValidationFailure
from pantry_pilot.domain.items import CartReset, GroceryItem
from pantry_pilot.services.store_locations import StoreLocationResolver

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Grocery item not found"
DEFAULT_PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"

_UPDATABLE_FIELDS = (
    "name",
    "category",
    "store_location",
    "default_unit",
    "need_to_buy",
    "quantity",
    "unit",
)


class ItemRepository(Protocol):
    """Persistence interface for grocery items."""

    def list_items(self) -> list[GroceryItem]:
        """Return every grocery item."""

    def get_item(self, item_id: UUID) -> GroceryItem | None:
        """Return an item by id, if present."""

    def get_items(self, item_ids: list[UUID]) -> list[GroceryItem]:
        """Return the existing items among the given ids."""

    def create_item(self, payload: dict[str, object]) -> GroceryItem:
        """Create an item and return it."""

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GroceryItem | None:
        """Apply a partial update and return the item, or None when missing."""

    def update_items(self, item_ids: list[UUID], payload: dict[str, object]) -> int:
        """Apply the same partial update to many items in one write."""

    def delete_item(self, item_id: UUID) -> bool:
        """Delete an item, returning False when it did not exist."""

    def reset_cart(self, updated_by: str | None, updated_at: datetime) -> int:
        """Clear in_cart on every carted item in one write and return the count."""


@dataclass
class ItemService:
    """Application service for the catalog and the shopping cart flags."""

    repository: ItemRepository
    resolver: StoreLocationResolver = field(default_factory=StoreLocationResolver)
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE
    reset_max_attempts: int = 3
    reset_retry_delay_seconds: float = 0.2
    sleep: Callable[[float], None] = time.sleep

    def list_items(self) -> list[GroceryItem]:
        """Return the whole catalog."""
        return self.repository.list_items()

    def get_item(self, item_id: UUID) -> GroceryItem:
        """Return an item or raise NotFoundError."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item

    def create_item(
        self, payload: dict[str, object], updated_by: str | None
    ) -> GroceryItem:
        """Validate and create a catalog item."""
        name = payload.get("name")
        category = payload.get("category")
        default_unit = payload.get("default_unit")
        if not name or not category or not default_unit:
            raise ValidationFailure(
                "Name, category, and defaultUnit are required fields"
            )

        record: dict[str, object] = {
            "name": name,
            "category": category,
            "default_unit": default_unit,
            "need_to_buy": bool(payload.get("need_to_buy") or False),
            "in_cart": False,
            "image_url": payload.get("image_url") or self.placeholder_image_url,
            "last_updated": _now(),
            "updated_by": updated_by,
        }
        store_location = payload.get("store_location") or self.resolver.resolve(
            str(name), str(category)
        )
        if store_location:
            record["store_location"] = store_location
        for optional in ("quantity", "unit"):
            if payload.get(optional) is not None:
                record[optional] = payload[optional]

        item = self.repository.create_item(record)
        logger.info("Created grocery item", extra={"item_id": str(item.id)})
        return item

    def update_item(
        self, item_id: UUID, changes: dict[str, object], updated_by: str | None
    ) -> GroceryItem:
        """Apply the supplied fields to an item."""
        payload = {key: changes[key] for key in _UPDATABLE_FIELDS if key in changes}
        if "image_url" in changes:
            payload["image_url"] = changes["image_url"] or self.placeholder_image_url
        return self._update(item_id, payload, updated_by)

    def delete_item(self, item_id: UUID) -> None:
        """Delete an item from the catalog."""
        if not self.repository.delete_item(item_id):
            raise NotFoundError(ITEM_NOT_FOUND)

    def toggle_need_to_buy(self, item_id: UUID, updated_by: str | None) -> bool:
        """Flip need_to_buy and return the new value."""
        item = self.get_item(item_id)
        need_to_buy = not item.need_to_buy
        self._update(item_id, {"need_to_buy": need_to_buy}, updated_by)
        return need_to_buy

    def toggle_in_cart(self, item_id: UUID, updated_by: str | None) -> bool:
        """Flip in_cart and return the new value."""
        item = self.get_item(item_id)
        in_cart = not item.in_cart
        self._update(item_id, {"in_cart": in_cart}, updated_by)
        return in_cart

    def move_to_cart(self, item_id: UUID, updated_by: str | None) -> GroceryItem:
        """Put an item in the cart and take it off the list in one write."""
        return self._update(
            item_id, {"in_cart": True, "need_to_buy": False}, updated_by
        )

    def move_to_shopping_list(
        self, item_id: UUID, updated_by: str | None
    ) -> GroceryItem:
        """Take an item out of the cart and back onto the list in one write."""
        return self._update(
            item_id, {"in_cart": False, "need_to_buy": True}, updated_by
        )

    def get_shopping_list_view(self) -> list[GroceryItem]:
        """Return every item that is wanted or already in the cart."""
        return [item for item in self.repository.list_items() if item.on_shopping_list]

    def reset_cart(self, updated_by: str | None) -> CartReset:
        """Empty the cart in a single all-or-nothing write."""
        attempts = max(1, self.reset_max_attempts)
        for attempt in range(1, attempts + 1):
            try:
                count = self.repository.reset_cart(updated_by, _now())
            except BackendFailure:
                if attempt == attempts:
                    raise
                logger.warning(
                    "Cart reset failed, retrying",
                    extra={"attempt": attempt, "max_attempts": attempts},
                )
                self.sleep(self.reset_retry_delay_seconds * attempt)
                continue
            logger.info("Reset cart", extra={"count": count})
            return CartReset(count=count)
        raise BackendFailure("Failed to reset cart")

    def _update(
        self, item_id: UUID, payload: dict[str, object], updated_by: str | None
    ) -> GroceryItem:
        stamped = {**payload, "last_updated": _now(), "updated_by": updated_by}
        item = self.repository.update_item(item_id, stamped)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item


def _now() -> datetime:
    return datetime.now(tz=UTC)
