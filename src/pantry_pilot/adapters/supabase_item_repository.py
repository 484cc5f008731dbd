"""Supabase repository for the grocery catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from pantry_pilot.adapters.supabase_support import execute, parse_timestamp, to_row
from pantry_pilot.domain.errors import BackendFailure
from pantry_pilot.domain.items import GroceryItem
from pantry_pilot.services.items import ItemRepository

TABLE = "grocery_items"


@dataclass
class SupabaseItemRepository(ItemRepository):
    """Supabase implementation for grocery items."""

    client: Client

    def list_items(self) -> list[GroceryItem]:
        """Return every grocery item ordered by name."""
        rows = execute(
            self.client.table(TABLE).select("*").order("name"),
            "Failed to get grocery items",
        )
        return [_parse_item(row) for row in rows]

    def get_item(self, item_id: UUID) -> GroceryItem | None:
        """Return an item by id, if present."""
        rows = execute(
            self.client.table(TABLE).select("*").eq("id", str(item_id)).limit(1),
            "Failed to get grocery item",
        )
        if not rows:
            return None
        return _parse_item(rows[0])

    def get_items(self, item_ids: list[UUID]) -> list[GroceryItem]:
        """Return the existing items among the given ids."""
        if not item_ids:
            return []
        rows = execute(
            self.client.table(TABLE)
            .select("*")
            .in_("id", [str(item_id) for item_id in item_ids]),
            "Failed to get grocery items",
        )
        return [_parse_item(row) for row in rows]

    def create_item(self, payload: dict[str, object]) -> GroceryItem:
        """Create an item and return it."""
        rows = execute(
            self.client.table(TABLE).insert(to_row(payload)),
            "Failed to create grocery item",
        )
        if not rows:
            raise BackendFailure("Failed to create grocery item")
        return _parse_item(rows[0])

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GroceryItem | None:
        """Apply a partial update and return the item, or None when missing."""
        rows = execute(
            self.client.table(TABLE).update(to_row(payload)).eq("id", str(item_id)),
            "Failed to update grocery item",
        )
        if not rows:
            return None
        return _parse_item(rows[0])

    def update_items(self, item_ids: list[UUID], payload: dict[str, object]) -> int:
        """Apply the same partial update to many items in one statement."""
        if not item_ids:
            return 0
        rows = execute(
            self.client.table(TABLE)
            .update(to_row(payload))
            .in_("id", [str(item_id) for item_id in item_ids]),
            "Failed to update grocery items",
        )
        return len(rows)

    def delete_item(self, item_id: UUID) -> bool:
        """Delete an item, returning False when it did not exist."""
        rows = execute(
            self.client.table(TABLE).delete().eq("id", str(item_id)),
            "Failed to delete grocery item",
        )
        return bool(rows)

    def reset_cart(self, updated_by: str | None, updated_at: datetime) -> int:
        """Clear in_cart on all carted items in a single statement."""
        rows = execute(
            self.client.table(TABLE)
            .update(
                to_row(
                    {
                        "in_cart": False,
                        "last_updated": updated_at,
                        "updated_by": updated_by,
                    }
                )
            )
            .eq("in_cart", True),
            "Failed to reset cart",
        )
        return len(rows)


def _parse_item(row: dict[str, object]) -> GroceryItem:
    """Parse a grocery item row into a domain model."""
    quantity = row.get("quantity")
    return GroceryItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        default_unit=str(row.get("default_unit", "")),
        need_to_buy=bool(row.get("need_to_buy")),
        in_cart=bool(row.get("in_cart")),
        store_location=row.get("store_location") or None,
        image_url=row.get("image_url"),
        quantity=float(quantity) if quantity is not None else None,
        unit=row.get("unit"),
        last_updated=parse_timestamp(row.get("last_updated")),
        updated_by=row.get("updated_by"),
    )
