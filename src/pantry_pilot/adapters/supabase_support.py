"""Shared helpers for Supabase-backed repositories."""

from datetime import datetime
from typing import Any
from uuid import UUID

import httpx
from postgrest.exceptions import APIError

from pantry_pilot.domain.errors import BackendFailure


def execute(query: Any, failure: str) -> list[dict[str, Any]]:
    """Run a PostgREST query, wrapping transport and API errors."""
    try:
        response = query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise BackendFailure(f"{failure}: {exc}") from exc
    return response.data or []


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert domain values into JSON-friendly column values."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, datetime):
            row[key] = value.isoformat()
        elif isinstance(value, UUID):
            row[key] = str(value)
        else:
            row[key] = value
    return row


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating empty values."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
