"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from pantry_pilot.config import Settings
from pantry_pilot.containers import AppContainer
from pantry_pilot.domain.errors import BackendFailure
from pantry_pilot.domain.items import GroceryItem
from pantry_pilot.domain.meals import Meal, MealIngredient
from pantry_pilot.domain.models import Caller, UserRecord
from pantry_pilot.services.catalog import CatalogService
from pantry_pilot.services.items import ItemRepository, ItemService
from pantry_pilot.services.meals import MealRepository, MealService
from pantry_pilot.services.users import AuthGateway, UserRepository, UserService

TEST_TOKEN = "good-token"
TEST_UID = "user-1"
AUTH_HEADERS = {"Authorization": f"Bearer {TEST_TOKEN}"}


@dataclass
class InMemoryItemRepository(ItemRepository):
    """In-memory grocery item repository for tests."""

    items: dict[UUID, GroceryItem] = field(default_factory=dict)
    bulk_writes: list[tuple[list[UUID], dict[str, object]]] = field(
        default_factory=list
    )
    reset_failures: int = 0
    reset_calls: int = 0

    def add(self, **fields: object) -> GroceryItem:
        values: dict[str, object] = {
            "id": uuid4(),
            "name": "Item",
            "category": "Pantry",
            "default_unit": "unit",
            "need_to_buy": False,
            "in_cart": False,
        }
        values.update(fields)
        item = GroceryItem(**values)  # type: ignore[arg-type]
        self.items[item.id] = item
        return item

    def list_items(self) -> list[GroceryItem]:
        return sorted(self.items.values(), key=lambda item: item.name)

    def get_item(self, item_id: UUID) -> GroceryItem | None:
        return self.items.get(item_id)

    def get_items(self, item_ids: list[UUID]) -> list[GroceryItem]:
        return [self.items[item_id] for item_id in item_ids if item_id in self.items]

    def create_item(self, payload: dict[str, object]) -> GroceryItem:
        return self.add(**payload)

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> GroceryItem | None:
        item = self.items.get(item_id)
        if item is None:
            return None
        updated = replace(item, **payload)  # type: ignore[arg-type]
        self.items[item_id] = updated
        return updated

    def update_items(self, item_ids: list[UUID], payload: dict[str, object]) -> int:
        self.bulk_writes.append((list(item_ids), dict(payload)))
        return sum(1 for item_id in item_ids if self.update_item(item_id, payload))

    def delete_item(self, item_id: UUID) -> bool:
        return self.items.pop(item_id, None) is not None

    def reset_cart(self, updated_by: str | None, updated_at: datetime) -> int:
        self.reset_calls += 1
        if self.reset_failures:
            self.reset_failures -= 1
            raise BackendFailure("Failed to reset cart")
        carted = [item_id for item_id, item in self.items.items() if item.in_cart]
        for item_id in carted:
            self.update_item(
                item_id,
                {
                    "in_cart": False,
                    "last_updated": updated_at,
                    "updated_by": updated_by,
                },
            )
        return len(carted)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)
    ingredients: dict[UUID, MealIngredient] = field(default_factory=dict)

    def list_meals(self, user_id: str) -> list[Meal]:
        owned = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.created_at, reverse=True)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def create_meal(self, payload: dict[str, object]) -> Meal:
        meal = Meal(id=uuid4(), **payload)  # type: ignore[arg-type]
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal | None:
        meal = self.meals.get(meal_id)
        if meal is None:
            return None
        updated = replace(meal, **payload)  # type: ignore[arg-type]
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)
        for ingredient_id in [
            ingredient.id
            for ingredient in self.ingredients.values()
            if ingredient.meal_id == meal_id
        ]:
            del self.ingredients[ingredient_id]

    def list_ingredients(self, meal_id: UUID) -> list[MealIngredient]:
        return [
            ingredient
            for ingredient in self.ingredients.values()
            if ingredient.meal_id == meal_id
        ]

    def get_ingredient(
        self, meal_id: UUID, ingredient_id: UUID
    ) -> MealIngredient | None:
        ingredient = self.ingredients.get(ingredient_id)
        if ingredient is None or ingredient.meal_id != meal_id:
            return None
        return ingredient

    def add_ingredient(
        self, meal_id: UUID, payload: dict[str, object]
    ) -> MealIngredient:
        ingredient = MealIngredient(
            id=uuid4(), meal_id=meal_id, **payload  # type: ignore[arg-type]
        )
        self.ingredients[ingredient.id] = ingredient
        return ingredient

    def update_ingredient(
        self, meal_id: UUID, ingredient_id: UUID, payload: dict[str, object]
    ) -> MealIngredient | None:
        ingredient = self.get_ingredient(meal_id, ingredient_id)
        if ingredient is None:
            return None
        updated = replace(ingredient, **payload)  # type: ignore[arg-type]
        self.ingredients[ingredient_id] = updated
        return updated

    def delete_ingredient(self, meal_id: UUID, ingredient_id: UUID) -> None:
        if self.get_ingredient(meal_id, ingredient_id) is not None:
            del self.ingredients[ingredient_id]


@dataclass
class FakeAuthGateway(AuthGateway):
    """Auth gateway accepting a fixed set of tokens."""

    tokens: dict[str, Caller] = field(
        default_factory=lambda: {
            TEST_TOKEN: Caller(uid=TEST_UID, email="user@example.com")
        }
    )
    created: list[str] = field(default_factory=list)

    def verify_token(self, token: str) -> Caller | None:
        return self.tokens.get(token)

    def create_user(
        self, email: str, password: str, display_name: str | None
    ) -> Caller:
        self.created.append(email)
        return Caller(uid=f"uid-{len(self.created)}", email=email)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user profile repository for tests."""

    profiles: dict[str, UserRecord] = field(default_factory=dict)

    def create_profile(self, user: UserRecord) -> UserRecord:
        self.profiles[user.id] = user
        return user


def make_meal(
    repository: InMemoryMealRepository, user_id: str = TEST_UID, name: str = "Tacos"
) -> Meal:
    return repository.create_meal(
        {
            "user_id": user_id,
            "name": name,
            "servings": 2,
            "created_at": datetime.now(tz=UTC),
        }
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
    )


@pytest.fixture
def item_repository() -> InMemoryItemRepository:
    return InMemoryItemRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def auth_gateway() -> FakeAuthGateway:
    return FakeAuthGateway()


@pytest.fixture
def item_service(item_repository: InMemoryItemRepository) -> ItemService:
    return ItemService(repository=item_repository, sleep=lambda _seconds: None)


@pytest.fixture
def meal_service(
    meal_repository: InMemoryMealRepository,
    item_repository: InMemoryItemRepository,
) -> MealService:
    return MealService(repository=meal_repository, item_repository=item_repository)


@pytest.fixture
def container(
    settings: Settings,
    item_service: ItemService,
    meal_service: MealService,
    item_repository: InMemoryItemRepository,
    user_repository: InMemoryUserRepository,
    auth_gateway: FakeAuthGateway,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        item_service=item_service,
        meal_service=meal_service,
        user_service=UserService(gateway=auth_gateway, repository=user_repository),
        catalog_service=CatalogService(repository=item_repository, batch_size=2),
        close_resources=close_resources,
    )
