"""ASGI entrypoint for the recipe generator API."""

from recipe_generator.api.app import create_app
from recipe_generator.containers import build_container

app = create_app(build_container())
