"""Custom exceptions for the voicemail service."""

from typing import Any


class StorageUploadError(Exception):
    """Raised when file upload to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageConfigurationError(Exception):
    """Raised when the storage bucket cannot be created or made public."""

    def __init__(self, bucket_name: str, cause: Exception | None = None):
        self.bucket_name = bucket_name
        self.cause = cause
        super().__init__(f"Failed to configure bucket '{bucket_name}'")


class NotificationError(Exception):
    """Raised when sending the operator notification fails."""

    def __init__(self, recipient: str, cause: Exception | str | None = None):
        self.recipient = recipient
        self.cause = cause
        message = f"Failed to send notification to '{recipient}'"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)


class StageError(Exception):
    """A request failure attributed to one processing stage.

    ``where`` is the stage tag reported to the caller and ``error`` is the
    underlying failure value, which may be an exception or a plain string.
    """

    def __init__(
        self,
        status_code: int,
        where: str,
        error: Any,
        extra: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        self.where = where
        self.error = error
        self.extra = extra or {}
        super().__init__(f"{where}: {error}")
