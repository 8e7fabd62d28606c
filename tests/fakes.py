"""Test doubles for the storage and notification backends."""

from __future__ import annotations

from contextlib import nullcontext
from typing import BinaryIO

from voicemail_service.config import AppConfig, MinioConfig, ResendConfig
from voicemail_service.domain import NotificationEmail
from voicemail_service.exceptions import NotificationError
from voicemail_service.interfaces import Notifier, StorageClient

VOICEMAIL_URL = "/api/voicemail"
PUBLIC_BASE = "https://files.test/voicemails"


class FakeStorage(StorageClient):
    """In-memory storage that records uploads."""

    def __init__(self, fail_with: Exception | None = None):
        self.fail_with = fail_with
        self.objects: dict[str, tuple[bytes, str]] = {}

    def upload(
        self, object_name: str, data: BinaryIO, size: int, content_type: str
    ) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        payload = data.read()
        assert len(payload) == size
        self.objects[object_name] = (payload, content_type)
        return f"{PUBLIC_BASE}/{object_name}"

    def ensure_public_bucket(self) -> None:
        pass


class FakeNotifier(Notifier):
    """Notifier that records sent emails or fails on demand."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[NotificationEmail] = []

    def send(self, email: NotificationEmail) -> None:
        if self.fail:
            raise NotificationError(email.recipient, "Resend returned 422: invalid from")
        self.sent.append(email)


def make_config(
    *,
    minio_user: str = "minio-user",
    minio_password: str = "minio-secret",
    resend_key: str = "re_test_key",
    endpoint: str = "minio:9000",
    max_audio_bytes: int | None = None,
) -> AppConfig:
    kwargs = {}
    if max_audio_bytes is not None:
        kwargs["max_audio_bytes"] = max_audio_bytes
    return AppConfig(
        minio=MinioConfig(endpoint=endpoint, user=minio_user, password=minio_password),
        resend=ResendConfig(api_key=resend_key),
        **kwargs,
    )


def storage_factory(storage: StorageClient):
    """Dependency override returning a factory that yields ``storage``."""
    return lambda: lambda config: storage


def notifier_factory(notifier: Notifier):
    """Dependency override returning a factory that opens ``notifier``."""
    return lambda: lambda config: nullcontext(notifier)
