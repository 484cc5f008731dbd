"""User registration and request authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from pantry_pilot.domain.errors import UnauthorizedError, ValidationFailure
from pantry_pilot.domain.models import Caller, UserRecord


class AuthGateway(Protocol):
    """Interface to the identity provider."""

    def verify_token(self, token: str) -> Caller | None:
        """Return the caller for a valid access token, or None."""

    def create_user(
        self, email: str, password: str, display_name: str | None
    ) -> Caller:
        """Create an identity and return it."""


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def create_profile(self, user: UserRecord) -> UserRecord:
        """Store a profile for a newly registered user."""


@dataclass
class UserService:
    """Application service for registration and token checks."""

    gateway: AuthGateway
    repository: UserRepository

    def register(
        self, email: str | None, password: str | None, display_name: str | None
    ) -> UserRecord:
        """Register a user with the identity provider and store a profile."""
        if not email or not password:
            raise ValidationFailure("Email and password are required")
        identity = self.gateway.create_user(email, password, display_name)
        return self.repository.create_profile(
            UserRecord(
                id=identity.uid,
                email=identity.email or email,
                display_name=display_name or None,
                created_at=datetime.now(tz=UTC),
            )
        )

    def authenticate(self, authorization: str | None) -> Caller:
        """Resolve a `Bearer <token>` header into a caller identity."""
        if not authorization or not authorization.startswith("Bearer "):
            raise UnauthorizedError("Unauthorized: No token provided")
        token = authorization.removeprefix("Bearer ").strip()
        caller = self.gateway.verify_token(token) if token else None
        if caller is None:
            raise UnauthorizedError("Unauthorized: Invalid token")
        return caller
