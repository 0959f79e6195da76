"""ASGI entrypoint for the food suggestion API."""

from food_suggest.api.app import create_app
from food_suggest.containers import build_container

app = create_app(build_container())
