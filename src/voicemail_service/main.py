"""FastAPI application entry point."""

from ddtrace import patch_all

from voicemail_service.app import create_app

patch_all()

app = create_app()
