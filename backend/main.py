"""ASGI entry point: ``uvicorn main:app``."""

from app import create_app
from core import settings
from core.logging import configure_logging

configure_logging(settings.log_level)

app = create_app()
