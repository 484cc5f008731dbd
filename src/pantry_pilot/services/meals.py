"""Meal and ingredient services."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from pantry_pilot.domain.errors import ForbiddenError, NotFoundError, ValidationFailure
from pantry_pilot.domain.meals import (
    IngredientDetail,
    Meal,
    MealDetail,
    MealIngredient,
    ShoppingListAddition,
)
from pantry_pilot.services.items import ITEM_NOT_FOUND, ItemRepository

logger = logging.getLogger(__name__)

_MEAL_FIELDS = (
    "name",
    "description",
    "image_url",
    "servings",
    "prep_time",
    "cook_time",
)


class MealRepository(Protocol):
    """Persistence interface for meals and their ingredients."""

    def list_meals(self, user_id: str) -> list[Meal]:
        """Return a user's meals, newest first."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def create_meal(self, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal | None:
        """Apply a partial update to a meal."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal together with all of its ingredients."""

    def list_ingredients(self, meal_id: UUID) -> list[MealIngredient]:
        """Return the ingredients of a meal."""

    def get_ingredient(
        self, meal_id: UUID, ingredient_id: UUID
    ) -> MealIngredient | None:
        """Return an ingredient of a meal, if present."""

    def add_ingredient(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealIngredient:
        """Create an ingredient under a meal."""

    def update_ingredient(
        self, meal_id: UUID, ingredient_id: UUID, payload: dict[str, object]
    ) -> MealIngredient | None:
        """Apply a partial update to an ingredient."""

    def delete_ingredient(self, meal_id: UUID, ingredient_id: UUID) -> None:
        """Delete an ingredient from a meal."""


@dataclass
class MealService:
    """Application service for user-owned meals."""

    repository: MealRepository
    item_repository: ItemRepository

    def list_meals(self, user_id: str) -> list[Meal]:
        """Return the caller's meals."""
        return self.repository.list_meals(user_id)

    def get_meal(self, user_id: str, meal_id: UUID) -> MealDetail:
        """Return a meal with its ingredients and their catalog items."""
        meal = self._owned_meal(user_id, meal_id)
        ingredients = self.repository.list_ingredients(meal_id)
        items = {
            item.id: item
            for item in self.item_repository.get_items(
                list({ingredient.item_id for ingredient in ingredients})
            )
        }
        return MealDetail(
            meal=meal,
            ingredients=[
                IngredientDetail(
                    ingredient=ingredient, item=items.get(ingredient.item_id)
                )
                for ingredient in ingredients
            ],
        )

    def create_meal(self, user_id: str, payload: dict[str, object]) -> Meal:
        """Create a meal owned by the caller."""
        if not payload.get("name"):
            raise ValidationFailure("Name is a required field")
        record = {key: payload.get(key) for key in _MEAL_FIELDS}
        record["servings"] = payload.get("servings") or 1
        record["user_id"] = user_id
        record["created_at"] = datetime.now(tz=UTC)
        return self.repository.create_meal(record)

    def update_meal(
        self, user_id: str, meal_id: UUID, changes: dict[str, object]
    ) -> Meal:
        """Apply the supplied fields to a meal."""
        self._owned_meal(user_id, meal_id)
        payload = {key: changes[key] for key in _MEAL_FIELDS if key in changes}
        if not payload:
            return self._owned_meal(user_id, meal_id)
        meal = self.repository.update_meal(meal_id, payload)
        if meal is None:
            raise NotFoundError("Meal not found")
        return meal

    def delete_meal(self, user_id: str, meal_id: UUID) -> None:
        """Delete a meal and its ingredients."""
        self._owned_meal(user_id, meal_id)
        self.repository.delete_meal(meal_id)

    def add_ingredient(
        self, user_id: str, meal_id: UUID, payload: dict[str, object]
    ) -> MealIngredient:
        """Attach a catalog item to a meal."""
        self._owned_meal(user_id, meal_id)
        raw_item_id = payload.get("item_id")
        if raw_item_id is None:
            raise ValidationFailure("itemId is a required field")
        try:
            item_id = UUID(str(raw_item_id))
        except ValueError as exc:
            raise ValidationFailure("itemId must be a valid id") from exc
        item = self.item_repository.get_item(item_id)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return self.repository.add_ingredient(
            meal_id,
            {
                "item_id": item.id,
                "quantity": payload.get("quantity") or 1,
                "unit": payload.get("unit") or item.default_unit or "unit",
            },
        )

    def update_ingredient(
        self,
        user_id: str,
        meal_id: UUID,
        ingredient_id: UUID,
        changes: dict[str, object],
    ) -> MealIngredient:
        """Change an ingredient's quantity or unit."""
        self._owned_meal(user_id, meal_id)
        existing = self._ingredient(meal_id, ingredient_id)
        payload = {key: changes[key] for key in ("quantity", "unit") if key in changes}
        if not payload:
            return existing
        updated = self.repository.update_ingredient(meal_id, ingredient_id, payload)
        if updated is None:
            raise NotFoundError("Ingredient not found")
        return updated

    def remove_ingredient(
        self, user_id: str, meal_id: UUID, ingredient_id: UUID
    ) -> None:
        """Remove an ingredient from a meal."""
        self._owned_meal(user_id, meal_id)
        self._ingredient(meal_id, ingredient_id)
        self.repository.delete_ingredient(meal_id, ingredient_id)

    def add_to_shopping_list(self, user_id: str, meal_id: UUID) -> ShoppingListAddition:
        """Flag every ingredient's catalog item as needed, in one write."""
        self._owned_meal(user_id, meal_id)
        ingredients = self.repository.list_ingredients(meal_id)
        if not ingredients:
            return ShoppingListAddition(item_ids=[])
        wanted = list(dict.fromkeys(ingredient.item_id for ingredient in ingredients))
        existing = {item.id for item in self.item_repository.get_items(wanted)}
        item_ids = [item_id for item_id in wanted if item_id in existing]
        if item_ids:
            self.item_repository.update_items(
                item_ids,
                {
                    "need_to_buy": True,
                    "last_updated": datetime.now(tz=UTC),
                    "updated_by": user_id,
                },
            )
        logger.info(
            "Added meal ingredients to shopping list",
            extra={"meal_id": str(meal_id), "count": len(item_ids)},
        )
        return ShoppingListAddition(item_ids=item_ids)

    def _owned_meal(self, user_id: str, meal_id: UUID) -> Meal:
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFoundError("Meal not found")
        if meal.user_id != user_id:
            raise ForbiddenError("Unauthorized: This meal does not belong to you")
        return meal

    def _ingredient(self, meal_id: UUID, ingredient_id: UUID) -> MealIngredient:
        ingredient = self.repository.get_ingredient(meal_id, ingredient_id)
        if ingredient is None:
            raise NotFoundError("Ingredient not found")
        return ingredient
