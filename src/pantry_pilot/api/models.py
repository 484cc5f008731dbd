"""Pydantic request bodies accepted by the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemCreate(CamelModel):
    """Body for creating a grocery item."""

    name: str | None = None
    category: str | None = None
    default_unit: str | None = None
    store_location: str | None = None
    image_url: str | None = None
    need_to_buy: bool | None = None
    quantity: float | None = None
    unit: str | None = None


class ItemUpdate(ItemCreate):
    """Body for a partial grocery item update."""


class MealCreate(CamelModel):
    """Body for creating or updating a meal."""

    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    servings: int | None = None
    prep_time: int | None = None
    cook_time: int | None = None


class IngredientCreate(CamelModel):
    """Body for attaching a catalog item to a meal."""

    item_id: str | None = None
    quantity: float | None = None
    unit: str | None = None


class IngredientUpdate(CamelModel):
    """Body for changing an ingredient amount."""

    quantity: float | None = None
    unit: str | None = None


class RegisterRequest(CamelModel):
    """Body for user registration."""

    email: str | None = None
    password: str | None = None
    display_name: str | None = None
