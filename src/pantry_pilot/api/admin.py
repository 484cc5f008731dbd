"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse  # noqa: TC002

from pantry_pilot.api.responses import category_payload, success
from pantry_pilot.domain.errors import UnauthorizedError
from pantry_pilot.services.classifier import category_info

if TYPE_CHECKING:
    from pantry_pilot.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise UnauthorizedError("Unauthorized: Invalid admin token")


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> JSONResponse:
    """Admin health check endpoint."""
    return success({"status": "ok"})


@router.post("/catalog/backfill-locations", dependencies=[Depends(require_admin)])
def backfill_store_locations(request: Request) -> JSONResponse:
    """Fill missing store locations from the shopper's guide."""
    container: AppContainer = request.app.state.container
    result = container.catalog_service.backfill_store_locations()
    return success(
        {"updated": result.updated, "unchanged": result.unchanged},
        f"Updated {result.updated} items",
    )


@router.post("/catalog/normalize", dependencies=[Depends(require_admin)])
def normalize_catalog(request: Request) -> JSONResponse:
    """Rewrite categories to display names and place unplaced items."""
    container: AppContainer = request.app.state.container
    result = container.catalog_service.normalize_catalog()
    return success(
        {"updated": result.updated, "unchanged": result.unchanged},
        f"Updated {result.updated} items",
    )


@router.get("/classify", dependencies=[Depends(require_admin)])
def classify_item(
    request: Request,
    name: str | None = None,
    category: str | None = None,
    store_location: str | None = None,
) -> JSONResponse:
    """Preview how an item would be categorized and placed."""
    container: AppContainer = request.app.state.container
    info = category_info(store_location, category, name)
    resolved = store_location or container.item_service.resolver.resolve(
        name or "", category or ""
    )
    return success({"category": category_payload(info), "storeLocation": resolved})
