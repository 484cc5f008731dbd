"""Supabase Auth implementation of the identity gateway."""

import logging
from dataclasses import dataclass

from supabase import Client

from pantry_pilot.domain.errors import ValidationFailure
from pantry_pilot.domain.models import Caller
from pantry_pilot.services.users import AuthGateway

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Verifies access tokens and creates users through Supabase Auth."""

    client: Client

    def verify_token(self, token: str) -> Caller | None:
        """Return the caller for a valid access token, or None."""
        try:
            response = self.client.auth.get_user(token)
        except Exception:
            logger.warning("Access token verification failed", exc_info=True)
            return None
        if response is None or response.user is None:
            return None
        return Caller(uid=str(response.user.id), email=response.user.email or "")

    def create_user(
        self, email: str, password: str, display_name: str | None
    ) -> Caller:
        """Create a confirmed identity and return it."""
        attributes: dict[str, object] = {
            "email": email,
            "password": password,
            "email_confirm": True,
        }
        if display_name:
            attributes["user_metadata"] = {"display_name": display_name}
        try:
            response = self.client.auth.admin.create_user(attributes)
        except Exception as exc:
            raise ValidationFailure(str(exc) or "Registration failed") from exc
        return Caller(uid=str(response.user.id), email=response.user.email or email)
