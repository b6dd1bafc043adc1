"""ASGI entrypoint for the food advisor API."""

from food_advisor.api.app import create_app
from food_advisor.containers import build_container

app = create_app(build_container())
