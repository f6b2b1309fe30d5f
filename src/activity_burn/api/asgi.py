"""ASGI entrypoint for the activity burn calculator API."""

from activity_burn.api.app import create_app
from activity_burn.containers import build_container

app = create_app(build_container())
