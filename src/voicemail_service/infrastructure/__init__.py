"""Concrete implementations of infrastructure interfaces."""

from .minio_storage import MinioStorage
from .multipart import DecodedForm, decode_form
from .resend_notifier import ResendNotifier

__all__ = ["MinioStorage", "ResendNotifier", "DecodedForm", "decode_form"]
