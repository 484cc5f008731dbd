"""Registration and login endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from pantry_pilot.api.models import RegisterRequest  # noqa: TC001
from pantry_pilot.api.responses import success

if TYPE_CHECKING:
    from pantry_pilot.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(body: RegisterRequest, request: Request) -> JSONResponse:
    """Create an identity and its profile row."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(
        body.email, body.password, body.display_name
    )
    return success(
        {
            "user": {
                "uid": user.id,
                "email": user.email,
                "displayName": user.display_name,
                "createdAt": user.created_at,
            }
        },
        "User registered successfully",
        status.HTTP_201_CREATED,
    )


@router.post("/login")
async def login() -> JSONResponse:
    """Sign-in happens client-side against the identity provider."""
    return success(message="Login is handled client-side")
