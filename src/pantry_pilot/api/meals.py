"""Meal and ingredient endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from pantry_pilot.api.dependencies import require_caller
from pantry_pilot.api.models import (  # noqa: TC001
    IngredientCreate,
    IngredientUpdate,
    MealCreate,
)
from pantry_pilot.api.responses import (
    ingredient_payload,
    meal_detail_payload,
    meal_payload,
    success,
)
from pantry_pilot.domain.models import Caller  # noqa: TC001

if TYPE_CHECKING:
    from pantry_pilot.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])

_CLEARABLE_FIELDS = frozenset({"description", "image_url", "prep_time", "cook_time"})


@router.get("")
def list_meals(
    request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return the caller's meals."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals(caller.uid)
    return success({"meals": [meal_payload(meal) for meal in meals]})


@router.post("")
def create_meal(
    body: MealCreate, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    meal = container.meal_service.create_meal(
        caller.uid, body.model_dump(exclude_none=True)
    )
    return success(
        {"meal": meal_payload(meal)},
        "Meal created successfully",
        status.HTTP_201_CREATED,
    )


@router.get("/{meal_id}")
def get_meal(
    meal_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return a meal with its ingredients and their catalog items."""
    container: AppContainer = request.app.state.container
    detail = container.meal_service.get_meal(caller.uid, meal_id)
    return success({"meal": meal_detail_payload(detail)})


@router.put("/{meal_id}")
def update_meal(
    meal_id: UUID,
    body: MealCreate,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    changes = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key in _CLEARABLE_FIELDS
    }
    meal = container.meal_service.update_meal(caller.uid, meal_id, changes)
    return success(
        {"id": meal_id, "meal": meal_payload(meal)}, "Meal updated successfully"
    )


@router.delete("/{meal_id}")
def delete_meal(
    meal_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(caller.uid, meal_id)
    return success({"id": meal_id}, "Meal deleted successfully")


@router.post("/{meal_id}/ingredients")
def add_ingredient(
    meal_id: UUID,
    body: IngredientCreate,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    ingredient = container.meal_service.add_ingredient(
        caller.uid, meal_id, body.model_dump(exclude_none=True)
    )
    return success(
        {"ingredient": ingredient_payload(ingredient)},
        "Ingredient added successfully",
        status.HTTP_201_CREATED,
    )


@router.put("/{meal_id}/ingredients/{ingredient_id}")
def update_ingredient(
    meal_id: UUID,
    ingredient_id: UUID,
    body: IngredientUpdate,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    ingredient = container.meal_service.update_ingredient(
        caller.uid, meal_id, ingredient_id, body.model_dump(exclude_none=True)
    )
    return success(
        {"id": ingredient_id, "ingredient": ingredient_payload(ingredient)},
        "Ingredient updated successfully",
    )


@router.delete("/{meal_id}/ingredients/{ingredient_id}")
def remove_ingredient(
    meal_id: UUID,
    ingredient_id: UUID,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> JSONResponse:
    container: AppContainer = request.app.state.container
    container.meal_service.remove_ingredient(caller.uid, meal_id, ingredient_id)
    return success({"id": ingredient_id}, "Ingredient removed successfully")


@router.post("/{meal_id}/shopping")
def add_to_shopping_list(
    meal_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Flag every ingredient of a meal as needed."""
    container: AppContainer = request.app.state.container
    addition = container.meal_service.add_to_shopping_list(caller.uid, meal_id)
    if addition.count == 0:
        return success(message="No ingredients to add to shopping list")
    return success(
        {"count": addition.count, "items": addition.item_ids},
        f"Added {addition.count} ingredients to shopping list",
    )
