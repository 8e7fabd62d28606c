"""Resend implementation of the Notifier interface."""

import httpx

from voicemail_service.domain import NotificationEmail
from voicemail_service.exceptions import NotificationError
from voicemail_service.interfaces import Notifier
from voicemail_service.logging import setup_logging

logger = setup_logging()


class ResendNotifier(Notifier):
    """Sends notification emails through the Resend HTTP API."""

    def __init__(self, client: httpx.Client, api_key: str):
        self._client = client
        self._api_key = api_key

    def send(self, email: NotificationEmail) -> None:
        payload = {
            "from": email.sender,
            "to": [email.recipient],
            "subject": email.subject,
            "html": email.html,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            response = self._client.post("/emails", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.exception(
                "Resend request failed",
                extra={"recipient": email.recipient},
            )
            raise NotificationError(email.recipient, e) from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(
                "Resend rejected email",
                extra={
                    "recipient": email.recipient,
                    "status_code": response.status_code,
                    "detail": detail,
                },
            )
            raise NotificationError(
                email.recipient, f"Resend returned {response.status_code}: {detail}"
            )

        logger.info(
            "Notification email sent",
            extra={"recipient": email.recipient, "email_id": _email_id(response)},
        )


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


def _email_id(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body.get("id") if isinstance(body, dict) else None
