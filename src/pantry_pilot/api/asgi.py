"""ASGI entrypoint for the PantryPilot API."""

from pantry_pilot.api.app import create_app
from pantry_pilot.containers import build_container

app = create_app(build_container())
