"""ASGI entrypoint for the FitMon analysis API."""

from fitmon.api.app import create_app
from fitmon.containers import build_container

app = create_app(build_container())
