"""Request dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from pantry_pilot.domain.models import Caller

if TYPE_CHECKING:
    from pantry_pilot.containers import AppContainer


def require_caller(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Caller:
    """Resolve the bearer token into the calling user."""
    container: AppContainer = request.app.state.container
    return container.user_service.authenticate(authorization)
