"""FastAPI dependency injection configuration.

Storage and notifier clients are handed to routes as factories, so that
client construction happens inside the route's own error handling.
"""

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Annotated

import httpx
from fastapi import Depends
from minio import Minio

from voicemail_service.config import AppConfig, load_config
from voicemail_service.infrastructure import MinioStorage, ResendNotifier
from voicemail_service.interfaces import Notifier, StorageClient

StorageFactory = Callable[[AppConfig], StorageClient]
NotifierFactory = Callable[[AppConfig], AbstractContextManager[Notifier]]


def get_config() -> AppConfig:
    """Returns configuration read from the environment for this request."""
    return load_config()


ConfigDep = Annotated[AppConfig, Depends(get_config)]


def build_storage(config: AppConfig) -> MinioStorage:
    """Creates a MinIO-backed storage client. No network calls are made."""
    client = Minio(
        endpoint=config.minio.endpoint,
        access_key=config.minio.user,
        secret_key=config.minio.password,
        secure=config.minio.secure,
    )
    return MinioStorage(client, config.minio.bucket_name, config.minio.public_base_url)


@contextmanager
def open_notifier(config: AppConfig) -> Iterator[Notifier]:
    """Yields a Resend notifier, closing its HTTP client afterwards."""
    with httpx.Client(
        base_url=config.resend.api_url,
        timeout=config.resend.timeout_seconds,
    ) as client:
        yield ResendNotifier(client, config.resend.api_key)


def get_storage_factory() -> StorageFactory:
    """Returns the callable that builds the storage client."""
    return build_storage


def get_notifier_factory() -> NotifierFactory:
    """Returns the callable that opens the notifier."""
    return open_notifier
