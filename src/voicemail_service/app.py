"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from voicemail_service.config import load_config
from voicemail_service.dependencies import build_storage
from voicemail_service.logging import setup_logging
from voicemail_service.routes import (
    health_router,
    method_not_allowed_handler,
    voicemail_router,
)

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()
    if config.has_blob:
        build_storage(config).ensure_public_bucket()
    else:
        logger.warning(
            "Storage credentials missing, skipping bucket setup",
            extra={"bucket_name": config.minio.bucket_name},
        )
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Voicemail Intake Service", lifespan=lifespan)
    app.include_router(health_router)
    app.include_router(voicemail_router)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    return app
