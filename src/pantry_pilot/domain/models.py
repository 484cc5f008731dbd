"""Domain models for users and caller identity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user profile."""

    id: str
    email: str
    display_name: str | None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Caller:
    """Authenticated identity attached to a request."""

    uid: str
    email: str = ""
