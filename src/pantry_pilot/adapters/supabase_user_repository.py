"""Supabase-backed user profile repository."""

from dataclasses import dataclass

from supabase import Client

from pantry_pilot.adapters.supabase_support import execute, parse_timestamp, to_row
from pantry_pilot.domain.errors import BackendFailure
from pantry_pilot.domain.models import UserRecord
from pantry_pilot.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def create_profile(self, user: UserRecord) -> UserRecord:
        """Insert the profile row for a newly registered user."""
        rows = execute(
            self.client.table("users").insert(
                to_row(
                    {
                        "id": user.id,
                        "email": user.email,
                        "display_name": user.display_name,
                        "created_at": user.created_at,
                    }
                )
            ),
            "Failed to create user profile",
        )
        if not rows:
            raise BackendFailure("Failed to create user profile")
        row = rows[0]
        return UserRecord(
            id=str(row["id"]),
            email=str(row.get("email", "")),
            display_name=row.get("display_name"),
            created_at=parse_timestamp(row.get("created_at")),
        )
