"""Domain models for the voicemail service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AudioUpload(BaseModel):
    """A decoded file part from the submitted form."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field_name: str
    filename: str | None = None
    content_type: str | None = None
    file: Any = Field(repr=False)

    def read(self) -> bytes:
        """Reads the whole spooled file from the beginning."""
        self.file.seek(0)
        return self.file.read()


class Submission(BaseModel, frozen=True):
    """A normalized voicemail submission."""

    name: str = ""
    message: str = ""
    audio: AudioUpload


class StoredObject(BaseModel, frozen=True):
    """An audio recording persisted in object storage."""

    key: str
    url: str
    content_type: str


class NotificationEmail(BaseModel, frozen=True):
    """An outbound operator notification."""

    sender: str
    recipient: str
    subject: str
    html: str


class NotificationResult(BaseModel, frozen=True):
    """Outcome of dispatching a notification."""

    delivered: bool
    error_detail: str = ""
