"""Catalog maintenance jobs for categories and store locations."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from pantry_pilot.domain.catalog import CATEGORIES, OnNoMatch
from pantry_pilot.domain.items import CatalogUpdate, GroceryItem
from pantry_pilot.services.classifier import classify
from pantry_pilot.services.items import ItemRepository
from pantry_pilot.services.store_locations import StoreLocationResolver

logger = logging.getLogger(__name__)

_Groups = dict[tuple[tuple[str, object], ...], list[UUID]]

_DISPLAY_NAMES = frozenset(info.name for info in CATEGORIES.values())


@dataclass
class CatalogService:
    """Bulk backfill and normalization of catalog metadata."""

    repository: ItemRepository
    batch_size: int = 500

    def backfill_store_locations(self) -> CatalogUpdate:
        """Fill missing store locations where the tables have a match."""
        resolver = StoreLocationResolver(on_no_match=OnNoMatch.LEAVE_UNSET)
        groups: _Groups = {}
        items = self.repository.list_items()
        for item in items:
            if item.store_location:
                continue
            location = resolver.resolve(item.name, item.category)
            if location is not None:
                groups.setdefault((("store_location", location),), []).append(item.id)
        updated = self._write(groups)
        logger.info(
            "Backfilled store locations",
            extra={"updated": updated, "unchanged": len(items) - updated},
        )
        return CatalogUpdate(updated=updated, unchanged=len(items) - updated)

    def normalize_catalog(self) -> CatalogUpdate:
        """Rewrite categories to display names and place every unplaced item."""
        resolver = StoreLocationResolver(on_no_match=OnNoMatch.GUESS_DEFAULT)
        groups: _Groups = {}
        items = self.repository.list_items()
        for item in items:
            changes = _normalized_changes(item, resolver)
            if changes:
                groups.setdefault(tuple(sorted(changes.items())), []).append(item.id)
        updated = self._write(groups, stamp=True)
        logger.info(
            "Normalized catalog",
            extra={"updated": updated, "unchanged": len(items) - updated},
        )
        return CatalogUpdate(updated=updated, unchanged=len(items) - updated)

    def _write(self, groups: _Groups, stamp: bool = False) -> int:
        updated = 0
        size = max(1, self.batch_size)
        for changes, item_ids in groups.items():
            payload: dict[str, object] = dict(changes)
            if stamp:
                payload["last_updated"] = datetime.now(tz=UTC)
            for start in range(0, len(item_ids), size):
                chunk = item_ids[start : start + size]
                self.repository.update_items(chunk, payload)
                updated += len(chunk)
        return updated


def _normalized_changes(
    item: GroceryItem, resolver: StoreLocationResolver
) -> dict[str, object]:
    changes: dict[str, object] = {}
    if item.category not in _DISPLAY_NAMES:
        changes["category"] = CATEGORIES[
            classify(item.store_location, item.category, item.name)
        ].name
    if not item.store_location:
        location = resolver.resolve(item.name, item.category)
        if location:
            changes["store_location"] = location
    return changes
