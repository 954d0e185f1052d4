"""ASGI entrypoint for the record service API."""

from record_service.api.app import create_app
from record_service.containers import build_container

app = create_app(build_container())
