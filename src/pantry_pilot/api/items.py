"""Grocery catalog and shopping cart endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from pantry_pilot.api.dependencies import require_caller
from pantry_pilot.api.models import ItemCreate, ItemUpdate  # noqa: TC001
from pantry_pilot.api.responses import group_payload, item_payload, success
from pantry_pilot.domain.models import Caller  # noqa: TC001
from pantry_pilot.services.shopping import group_by_category, split_list_and_cart

if TYPE_CHECKING:
    from pantry_pilot.containers import AppContainer

router = APIRouter(prefix="/items", tags=["items"])

_CLEARABLE_FIELDS = frozenset({"image_url", "store_location", "quantity", "unit"})


@router.get("")
def list_items(
    request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return the whole catalog."""
    container: AppContainer = request.app.state.container
    items = container.item_service.list_items()
    return success({"items": [item_payload(item) for item in items]})


@router.post("")
def create_item(
    body: ItemCreate, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Create a catalog item."""
    container: AppContainer = request.app.state.container
    item = container.item_service.create_item(
        body.model_dump(exclude_none=True), caller.uid
    )
    return success(
        item_payload(item),
        "Grocery item created successfully",
        status.HTTP_201_CREATED,
    )


@router.get("/shopping")
def shopping_list(
    request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return every item that is wanted or in the cart."""
    container: AppContainer = request.app.state.container
    items = container.item_service.get_shopping_list_view()
    return success({"items": [item_payload(item) for item in items]})


@router.get("/shopping/grouped")
def grouped_shopping_list(
    request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return the list grouped by category in walking order, plus the cart."""
    container: AppContainer = request.app.state.container
    split = split_list_and_cart(container.item_service.get_shopping_list_view())
    groups = group_by_category(split.to_buy)
    return success(
        {
            "groups": [group_payload(group) for group in groups],
            "inCart": [item_payload(item) for item in split.in_cart],
        }
    )


@router.post("/reset-cart")
def reset_cart(
    request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Take every item out of the cart."""
    container: AppContainer = request.app.state.container
    result = container.item_service.reset_cart(caller.uid)
    if result.count == 0:
        return success(message="No items in cart to reset")
    return success({"count": result.count}, f"Reset {result.count} items in cart")


@router.get("/{item_id}")
def get_item(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Return a single catalog item."""
    container: AppContainer = request.app.state.container
    item = container.item_service.get_item(item_id)
    return success({"item": item_payload(item)})


@router.put("/{item_id}")
def update_item(
    item_id: UUID,
    body: ItemUpdate,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> JSONResponse:
    """Apply a partial update to a catalog item."""
    container: AppContainer = request.app.state.container
    changes = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key in _CLEARABLE_FIELDS
    }
    item = container.item_service.update_item(item_id, changes, caller.uid)
    return success(
        {"id": item_id, "item": item_payload(item)},
        "Grocery item updated successfully",
    )


@router.delete("/{item_id}")
def delete_item(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Delete a catalog item."""
    container: AppContainer = request.app.state.container
    container.item_service.delete_item(item_id)
    return success({"id": item_id}, "Grocery item deleted successfully")


@router.put("/{item_id}/buy")
def toggle_need_to_buy(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Flip whether the item is on the shopping list."""
    container: AppContainer = request.app.state.container
    need_to_buy = container.item_service.toggle_need_to_buy(item_id, caller.uid)
    return success(
        {"id": item_id, "needToBuy": need_to_buy}, "Grocery item updated successfully"
    )


@router.put("/{item_id}/cart")
def toggle_in_cart(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Flip whether the item is in the cart."""
    container: AppContainer = request.app.state.container
    in_cart = container.item_service.toggle_in_cart(item_id, caller.uid)
    return success(
        {"id": item_id, "inCart": in_cart}, "Grocery item updated successfully"
    )


@router.post("/{item_id}/move-to-cart")
def move_to_cart(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Move an item from the list into the cart."""
    container: AppContainer = request.app.state.container
    item = container.item_service.move_to_cart(item_id, caller.uid)
    return success(
        {"id": item_id, "item": item_payload(item)}, "Grocery item moved to cart"
    )


@router.post("/{item_id}/move-to-list")
def move_to_shopping_list(
    item_id: UUID, request: Request, caller: Caller = Depends(require_caller)
) -> JSONResponse:
    """Move an item from the cart back onto the list."""
    container: AppContainer = request.app.state.container
    item = container.item_service.move_to_shopping_list(item_id, caller.uid)
    return success(
        {"id": item_id, "item": item_payload(item)},
        "Grocery item moved to shopping list",
    )
