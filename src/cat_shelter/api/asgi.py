"""ASGI entrypoint for the cat shelter API."""

from cat_shelter.api.app import create_app
from cat_shelter.containers import build_container

app = create_app(build_container())
