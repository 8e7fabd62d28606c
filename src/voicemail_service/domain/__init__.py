from .models import (
    AudioUpload,
    NotificationEmail,
    NotificationResult,
    StoredObject,
    Submission,
)
from .voicemail import (
    DEFAULT_MIME_TYPE,
    build_object_name,
    clean_text,
    compose_notification,
    escape_html,
    pick_extension,
)

__all__ = [
    "AudioUpload",
    "NotificationEmail",
    "NotificationResult",
    "StoredObject",
    "Submission",
    "DEFAULT_MIME_TYPE",
    "build_object_name",
    "clean_text",
    "compose_notification",
    "escape_html",
    "pick_extension",
]
