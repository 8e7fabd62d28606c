"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field

MAX_AUDIO_BYTES = 25 * 1024 * 1024
NAME_MAX_LENGTH = 120
MESSAGE_MAX_LENGTH = 3000


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "voicemails"
    secure: bool = False
    public_url: str = ""

    @computed_field
    @property
    def public_base_url(self) -> str:
        """Returns the base URL under which stored objects are publicly readable."""
        if self.public_url:
            return self.public_url.rstrip("/")
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.endpoint}"


class ResendConfig(BaseModel, frozen=True):
    """Resend transactional email API configuration."""

    api_key: str
    api_url: str = "https://api.resend.com"
    timeout_seconds: float = 10.0


class NotificationConfig(BaseModel, frozen=True):
    """Addresses and subject used for operator notifications."""

    recipient: str = "voicemail@example.com"
    sender: str = "onboarding@resend.dev"
    subject_prefix: str = "New Voicemail"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    resend: ResendConfig
    notification: NotificationConfig = NotificationConfig()
    max_audio_bytes: int = MAX_AUDIO_BYTES

    @property
    def has_blob(self) -> bool:
        return bool(self.minio.user and self.minio.password)

    @property
    def has_resend(self) -> bool:
        return bool(self.resend.api_key)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "voicemails"),
            secure=_env_flag("MINIO_SECURE"),
            public_url=os.getenv("MINIO_PUBLIC_URL", ""),
        ),
        resend=ResendConfig(
            api_key=os.getenv("RESEND_API_KEY", ""),
            api_url=os.getenv("RESEND_API_URL", "https://api.resend.com"),
        ),
        notification=NotificationConfig(
            recipient=os.getenv("VOICEMAIL_TO") or "voicemail@example.com",
            sender=os.getenv("VOICEMAIL_FROM") or "onboarding@resend.dev",
            subject_prefix=os.getenv("VOICEMAIL_SUBJECT") or "New Voicemail",
        ),
    )
