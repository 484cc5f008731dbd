"""Response envelope and camelCase serializers for API payloads."""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from pantry_pilot.domain.catalog import CategoryInfo
from pantry_pilot.domain.items import GroceryItem
from pantry_pilot.domain.meals import IngredientDetail, Meal, MealDetail, MealIngredient
from pantry_pilot.services.shopping import CategoryGroup


def success(
    data: Any = None,
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Wrap a payload in the success envelope."""
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def failure(
    error: str, status_code: int = status.HTTP_400_BAD_REQUEST
) -> JSONResponse:
    """Wrap an error message in the failure envelope."""
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": error}
    )


def item_payload(item: GroceryItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "category": item.category,
        "storeLocation": item.store_location,
        "defaultUnit": item.default_unit,
        "imageUrl": item.image_url,
        "needToBuy": item.need_to_buy,
        "inCart": item.in_cart,
        "quantity": item.quantity,
        "unit": item.unit,
        "lastUpdated": item.last_updated,
        "updatedBy": item.updated_by,
    }


def category_payload(info: CategoryInfo) -> dict[str, str]:
    return {
        "key": info.key,
        "name": info.name,
        "color": info.color,
        "lightColor": info.light_color,
        "borderColor": info.border_color,
    }


def group_payload(group: CategoryGroup) -> dict[str, Any]:
    return {
        "category": category_payload(group.info),
        "items": [item_payload(item) for item in group.items],
    }


def meal_payload(meal: Meal) -> dict[str, Any]:
    return {
        "id": meal.id,
        "userId": meal.user_id,
        "name": meal.name,
        "description": meal.description,
        "imageUrl": meal.image_url,
        "servings": meal.servings,
        "prepTime": meal.prep_time,
        "cookTime": meal.cook_time,
        "createdAt": meal.created_at,
    }


def ingredient_payload(ingredient: MealIngredient) -> dict[str, Any]:
    return {
        "id": ingredient.id,
        "mealId": ingredient.meal_id,
        "itemId": ingredient.item_id,
        "quantity": ingredient.quantity,
        "unit": ingredient.unit,
    }


def meal_detail_payload(detail: MealDetail) -> dict[str, Any]:
    """Serialize a meal with each ingredient's catalog item embedded."""
    return {
        **meal_payload(detail.meal),
        "ingredients": [_ingredient_detail(entry) for entry in detail.ingredients],
    }


def _ingredient_detail(entry: IngredientDetail) -> dict[str, Any]:
    return {
        **ingredient_payload(entry.ingredient),
        "item": item_payload(entry.item) if entry.item is not None else None,
    }
