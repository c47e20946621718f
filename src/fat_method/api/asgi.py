"""ASGI entrypoint for the fat method API."""

from fat_method.api.app import create_app
from fat_method.containers import build_container

app = create_app(build_container())
