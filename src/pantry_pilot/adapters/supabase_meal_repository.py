"""Supabase repository for meals and meal ingredients."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from pantry_pilot.adapters.supabase_support import execute, parse_timestamp, to_row
from pantry_pilot.domain.errors import BackendFailure
from pantry_pilot.domain.meals import Meal, MealIngredient
from pantry_pilot.services.meals import MealRepository

MEALS = "meals"
INGREDIENTS = "meal_ingredients"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, user_id: str) -> list[Meal]:
        """Return a user's meals, newest first."""
        rows = execute(
            self.client.table(MEALS)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True),
            "Failed to get meals",
        )
        return [_parse_meal(row) for row in rows]

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        rows = execute(
            self.client.table(MEALS).select("*").eq("id", str(meal_id)).limit(1),
            "Failed to get meal",
        )
        if not rows:
            return None
        return _parse_meal(rows[0])

    def create_meal(self, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""
        rows = execute(
            self.client.table(MEALS).insert(to_row(payload)),
            "Failed to create meal",
        )
        if not rows:
            raise BackendFailure("Failed to create meal")
        return _parse_meal(rows[0])

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal | None:
        """Apply a partial update to a meal."""
        rows = execute(
            self.client.table(MEALS).update(to_row(payload)).eq("id", str(meal_id)),
            "Failed to update meal",
        )
        if not rows:
            return None
        return _parse_meal(rows[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal; ingredients go with it through the meal_id FK cascade."""
        execute(
            self.client.table(MEALS).delete().eq("id", str(meal_id)),
            "Failed to delete meal",
        )

    def list_ingredients(self, meal_id: UUID) -> list[MealIngredient]:
        """Return the ingredients of a meal."""
        rows = execute(
            self.client.table(INGREDIENTS)
            .select("*")
            .eq("meal_id", str(meal_id))
            .order("id"),
            "Failed to get ingredients",
        )
        return [_parse_ingredient(row) for row in rows]

    def get_ingredient(
        self, meal_id: UUID, ingredient_id: UUID
    ) -> MealIngredient | None:
        """Return an ingredient of a meal, if present."""
        rows = execute(
            self.client.table(INGREDIENTS)
            .select("*")
            .eq("meal_id", str(meal_id))
            .eq("id", str(ingredient_id))
            .limit(1),
            "Failed to get ingredient",
        )
        if not rows:
            return None
        return _parse_ingredient(rows[0])

    def add_ingredient(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealIngredient:
        """Create an ingredient under a meal."""
        rows = execute(
            self.client.table(INGREDIENTS).insert(
                to_row({"meal_id": meal_id, **payload})
            ),
            "Failed to add ingredient",
        )
        if not rows:
            raise BackendFailure("Failed to add ingredient")
        return _parse_ingredient(rows[0])

    def update_ingredient(
        self, meal_id: UUID, ingredient_id: UUID, payload: dict[str, object]
    ) -> MealIngredient | None:
        """Apply a partial update to an ingredient."""
        rows = execute(
            self.client.table(INGREDIENTS)
            .update(to_row(payload))
            .eq("meal_id", str(meal_id))
            .eq("id", str(ingredient_id)),
            "Failed to update ingredient",
        )
        if not rows:
            return None
        return _parse_ingredient(rows[0])

    def delete_ingredient(self, meal_id: UUID, ingredient_id: UUID) -> None:
        """Delete an ingredient from a meal."""
        execute(
            self.client.table(INGREDIENTS)
            .delete()
            .eq("meal_id", str(meal_id))
            .eq("id", str(ingredient_id)),
            "Failed to remove ingredient",
        )


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(str(row["id"])),
        user_id=str(row.get("user_id", "")),
        name=str(row.get("name", "")),
        servings=int(row.get("servings") or 1),
        created_at=parse_timestamp(row.get("created_at")) or datetime.now(tz=UTC),
        description=row.get("description"),
        image_url=row.get("image_url"),
        prep_time=row.get("prep_time"),
        cook_time=row.get("cook_time"),
    )


def _parse_ingredient(row: dict[str, object]) -> MealIngredient:
    return MealIngredient(
        id=UUID(str(row["id"])),
        meal_id=UUID(str(row["meal_id"])),
        item_id=UUID(str(row["item_id"])),
        quantity=float(row.get("quantity") or 1),
        unit=str(row.get("unit") or "unit"),
    )
