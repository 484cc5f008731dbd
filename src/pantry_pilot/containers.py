"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pantry_pilot.adapters.supabase_auth_gateway import SupabaseAuthGateway
from pantry_pilot.adapters.supabase_item_repository import SupabaseItemRepository
from pantry_pilot.adapters.supabase_meal_repository import SupabaseMealRepository
from pantry_pilot.adapters.supabase_user_repository import SupabaseUserRepository
from pantry_pilot.config import Settings
from pantry_pilot.services.catalog import CatalogService
from pantry_pilot.services.items import ItemService
from pantry_pilot.services.meals import MealService
from pantry_pilot.services.store_locations import StoreLocationResolver
from pantry_pilot.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    item_service: ItemService
    meal_service: MealService
    user_service: UserService
    catalog_service: CatalogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    item_repository = SupabaseItemRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    item_service = ItemService(
        repository=item_repository,
        resolver=StoreLocationResolver(
            on_no_match=resolved_settings.store_location_on_no_match
        ),
        placeholder_image_url=resolved_settings.placeholder_image_url,
        reset_max_attempts=resolved_settings.reset_cart_max_attempts,
        reset_retry_delay_seconds=resolved_settings.reset_cart_retry_delay_seconds,
    )
    meal_service = MealService(
        repository=meal_repository, item_repository=item_repository
    )
    user_service = UserService(
        gateway=SupabaseAuthGateway(supabase_client),
        repository=SupabaseUserRepository(supabase_client),
    )
    catalog_service = CatalogService(
        repository=item_repository, batch_size=resolved_settings.catalog_batch_size
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        item_service=item_service,
        meal_service=meal_service,
        user_service=user_service,
        catalog_service=catalog_service,
        close_resources=close_resources,
    )
