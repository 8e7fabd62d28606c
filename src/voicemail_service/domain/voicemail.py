"""Pure helpers that turn a form submission into storage keys and emails."""

import secrets
import time
from typing import Any

from voicemail_service.config import NotificationConfig

from .models import NotificationEmail, StoredObject, Submission

DEFAULT_MIME_TYPE = "audio/webm"
OBJECT_PREFIX = "voicemails"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def clean_text(value: Any, max_length: int) -> str:
    """Returns ``value`` as a trimmed string capped at ``max_length`` characters."""
    if value is None:
        return ""
    return str(value).strip()[:max_length]


def pick_extension(mime_type: str | None) -> str:
    """
    Chooses a file extension for an audio MIME type.

    WAV and Ogg are recognized by substring. Everything else, including
    a missing type, is stored as WebM.
    """
    if not mime_type:
        return "webm"
    if "wav" in mime_type:
        return "wav"
    if "ogg" in mime_type:
        return "ogg"
    return "webm"


def build_object_name(mime_type: str | None, now_ms: int | None = None) -> str:
    """
    Builds a unique storage key for a voicemail recording.

    The key embeds the upload time in milliseconds and a 64-bit random hex
    suffix, so keys built within the same millisecond still differ.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = secrets.token_hex(8)
    return f"{OBJECT_PREFIX}/voicemail-{now_ms}-{suffix}.{pick_extension(mime_type)}"


def escape_html(value: Any) -> str:
    text = str(value)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def compose_notification(
    submission: Submission,
    stored: StoredObject,
    config: NotificationConfig,
) -> NotificationEmail:
    """Builds the operator email announcing a stored voicemail."""
    subject = config.subject_prefix
    if submission.name:
        subject = f"{subject} from {submission.name}"

    url = escape_html(stored.url)
    html = f"""
<div style="font-family:Arial,Helvetica,sans-serif; line-height:1.4;">
  <h2 style="margin:0 0 10px;">New voicemail received</h2>
  <p style="margin:0 0 8px;"><strong>Name:</strong> {escape_html(submission.name or "(none)")}</p>
  <p style="margin:0 0 8px;"><strong>Message:</strong><br>{escape_html(submission.message or "(none)")}</p>
  <p style="margin:12px 0 8px;"><strong>Audio link:</strong><br>
    <a href="{url}">{url}</a>
  </p>
  <p style="margin:0; color:#666; font-size:12px;">File: {escape_html(stored.key)} &bull; {escape_html(stored.content_type)}</p>
</div>
"""

    return NotificationEmail(
        sender=config.sender,
        recipient=config.recipient,
        subject=subject,
        html=html,
    )
