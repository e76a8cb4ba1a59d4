"""ASGI entrypoint for the HealthScan API."""

from health_scan.api.app import create_app
from health_scan.containers import build_container

app = create_app(build_container())
