"""Domain models for meals and their ingredients."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pantry_pilot.domain.items import GroceryItem


@dataclass(frozen=True)
class Meal:
    """A named recipe owned by a single user."""

    id: UUID
    user_id: str
    name: str
    servings: int
    created_at: datetime
    description: str | None = None
    image_url: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None


@dataclass(frozen=True)
class MealIngredient:
    """A catalog item used by a meal, with its own amount."""

    id: UUID
    meal_id: UUID
    item_id: UUID
    quantity: float
    unit: str


@dataclass(frozen=True)
class IngredientDetail:
    """Ingredient joined with its catalog item, if it still exists."""

    ingredient: MealIngredient
    item: GroceryItem | None


@dataclass(frozen=True)
class MealDetail:
    """Meal with its ingredients."""

    meal: Meal
    ingredients: list[IngredientDetail]


@dataclass(frozen=True)
class ShoppingListAddition:
    """Catalog items flagged for purchase from a meal."""

    item_ids: list[UUID]

    @property
    def count(self) -> int:
        return len(self.item_ids)
