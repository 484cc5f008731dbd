"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import SimpleNamespace
from uuid import uuid4

import httpx
import pytest

from pantry_pilot.adapters.supabase_auth_gateway import SupabaseAuthGateway
from pantry_pilot.adapters.supabase_item_repository import SupabaseItemRepository
from pantry_pilot.adapters.supabase_meal_repository import SupabaseMealRepository
from pantry_pilot.adapters.supabase_user_repository import SupabaseUserRepository
from pantry_pilot.domain.errors import BackendFailure, ValidationFailure
from pantry_pilot.domain.models import UserRecord


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    error: Exception | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def in_(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        if self.error is not None:
            raise self.error
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: object | None = None

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _item_row(**fields: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": str(uuid4()),
        "name": "Cereal",
        "category": "Breakfast",
        "default_unit": "box",
        "need_to_buy": True,
        "in_cart": False,
        "store_location": "3",
        "image_url": None,
        "quantity": None,
        "unit": None,
        "last_updated": "2024-05-01T10:00:00+00:00",
        "updated_by": "user-1",
    }
    row.update(fields)
    return row


def test_item_repository_parses_rows() -> None:
    client = FakeSupabaseClient()
    client.table("grocery_items").queue("select", [_item_row(quantity=2)])

    items = SupabaseItemRepository(client).list_items()

    assert items[0].name == "Cereal"
    assert items[0].need_to_buy is True
    assert items[0].quantity == 2.0
    assert items[0].last_updated == datetime(2024, 5, 1, 10, tzinfo=UTC)


def test_item_repository_update_serializes_and_reports_missing() -> None:
    client = FakeSupabaseClient()
    table = client.table("grocery_items")
    item_id = uuid4()
    stamp = datetime(2024, 5, 1, tzinfo=UTC)
    repository = SupabaseItemRepository(client)

    updated = repository.update_item(item_id, {"in_cart": True, "last_updated": stamp})

    assert updated is None
    assert table.last_payload == {
        "in_cart": True,
        "last_updated": "2024-05-01T00:00:00+00:00",
    }
    assert ("id", str(item_id)) in table.last_filters


def test_item_repository_bulk_updates_filter_by_ids() -> None:
    client = FakeSupabaseClient()
    table = client.table("grocery_items")
    ids = [uuid4(), uuid4()]
    table.queue("update", [{"id": str(ids[0])}, {"id": str(ids[1])}])

    count = SupabaseItemRepository(client).update_items(ids, {"need_to_buy": True})

    assert count == 2
    assert ("id", [str(item_id) for item_id in ids]) in table.last_filters
    assert SupabaseItemRepository(client).update_items([], {"need_to_buy": True}) == 0


def test_item_repository_reset_cart_is_single_update() -> None:
    client = FakeSupabaseClient()
    table = client.table("grocery_items")
    table.queue("update", [_item_row(), _item_row()])

    count = SupabaseItemRepository(client).reset_cart(
        "user-1", datetime(2024, 5, 1, tzinfo=UTC)
    )

    assert count == 2
    assert table.actions == ["update"]
    assert ("in_cart", True) in table.last_filters
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["in_cart"] is False
    assert table.last_payload["updated_by"] == "user-1"


def test_item_repository_wraps_transport_errors() -> None:
    client = FakeSupabaseClient()
    client.table("grocery_items").error = httpx.ConnectError("connection refused")

    with pytest.raises(BackendFailure) as excinfo:
        SupabaseItemRepository(client).list_items()
    assert "Failed to get grocery items" in excinfo.value.message


def test_item_repository_create_requires_returned_row() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(BackendFailure):
        SupabaseItemRepository(client).create_item({"name": "Milk"})


def test_meal_repository_delete_is_single_statement() -> None:
    client = FakeSupabaseClient()
    meal_id = uuid4()

    SupabaseMealRepository(client).delete_meal(meal_id)

    assert client.table("meals").actions == ["delete"]
    assert client.table("meals").last_filters == [("id", str(meal_id))]
    assert client.table("meal_ingredients").actions == []


def test_meal_repository_failed_delete_leaves_ingredients() -> None:
    client = FakeSupabaseClient()
    client.table("meals").error = httpx.ConnectError("connection refused")

    with pytest.raises(BackendFailure) as excinfo:
        SupabaseMealRepository(client).delete_meal(uuid4())
    assert "Failed to delete meal" in excinfo.value.message
    assert client.table("meal_ingredients").actions == []


def test_meal_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    meal_id = str(uuid4())
    item_id = str(uuid4())
    client.table("meals").queue(
        "insert",
        [
            {
                "id": meal_id,
                "user_id": "user-1",
                "name": "Tacos",
                "servings": 4,
                "created_at": "2024-05-01T10:00:00+00:00",
            }
        ],
    )
    client.table("meal_ingredients").queue(
        "insert",
        [
            {
                "id": str(uuid4()),
                "meal_id": meal_id,
                "item_id": item_id,
                "quantity": 2,
                "unit": "packs",
            }
        ],
    )
    repository = SupabaseMealRepository(client)

    meal = repository.create_meal({"user_id": "user-1", "name": "Tacos"})
    ingredient = repository.add_ingredient(meal.id, {"item_id": item_id})

    assert meal.servings == 4
    assert str(ingredient.meal_id) == meal_id
    assert ingredient.quantity == 2.0
    assert client.table("meal_ingredients").last_payload == {
        "meal_id": meal_id,
        "item_id": item_id,
    }


def test_user_repository_creates_profile() -> None:
    client = FakeSupabaseClient()
    client.table("users").queue(
        "insert", [{"id": "uid-1", "email": "a@example.com", "display_name": None}]
    )

    profile = SupabaseUserRepository(client).create_profile(
        UserRecord(id="uid-1", email="a@example.com", display_name=None)
    )

    assert profile.id == "uid-1"
    assert client.table("users").last_payload == {
        "id": "uid-1",
        "email": "a@example.com",
        "display_name": None,
        "created_at": None,
    }


@dataclass
class FakeAuthAdmin:
    created: list[dict[str, object]] = field(default_factory=list)
    error: Exception | None = None

    def create_user(self, attributes: dict[str, object]) -> SimpleNamespace:
        if self.error is not None:
            raise self.error
        self.created.append(attributes)
        return SimpleNamespace(
            user=SimpleNamespace(id="uid-9", email=attributes["email"])
        )


@dataclass
class FakeAuth:
    admin: FakeAuthAdmin = field(default_factory=FakeAuthAdmin)
    users: dict[str, str] = field(default_factory=dict)

    def get_user(self, jwt: str) -> SimpleNamespace:
        if jwt not in self.users:
            raise RuntimeError("invalid JWT")
        return SimpleNamespace(
            user=SimpleNamespace(id=self.users[jwt], email="a@example.com")
        )


def test_auth_gateway_verifies_tokens() -> None:
    auth = FakeAuth(users={"good": "uid-1"})
    gateway = SupabaseAuthGateway(FakeSupabaseClient(auth=auth))

    caller = gateway.verify_token("good")

    assert caller is not None
    assert caller.uid == "uid-1"
    assert gateway.verify_token("bad") is None


def test_auth_gateway_creates_confirmed_users() -> None:
    auth = FakeAuth()
    gateway = SupabaseAuthGateway(FakeSupabaseClient(auth=auth))

    caller = gateway.create_user("a@example.com", "secret", "Ann")

    assert caller.uid == "uid-9"
    assert auth.admin.created[0]["email_confirm"] is True
    assert auth.admin.created[0]["user_metadata"] == {"display_name": "Ann"}


def test_auth_gateway_rejected_registration_is_validation_failure() -> None:
    auth = FakeAuth(admin=FakeAuthAdmin(error=RuntimeError("User already registered")))
    gateway = SupabaseAuthGateway(FakeSupabaseClient(auth=auth))

    with pytest.raises(ValidationFailure) as excinfo:
        gateway.create_user("a@example.com", "secret", None)
    assert excinfo.value.message == "User already registered"
