"""ASGI entrypoint for the shoot tracker API."""

from shoot_tracker.api.app import create_app
from shoot_tracker.containers import build_container

app = create_app(build_container())
