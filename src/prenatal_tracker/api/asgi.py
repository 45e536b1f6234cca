"""ASGI entrypoint for the prenatal tracker API."""

from prenatal_tracker.api.app import create_app
from prenatal_tracker.containers import build_container

app = create_app(build_container())
