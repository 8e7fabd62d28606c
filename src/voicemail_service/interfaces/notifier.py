"""Abstract interface for operator notifications."""

from abc import ABC, abstractmethod

from voicemail_service.domain import NotificationEmail


class Notifier(ABC):
    """Abstract base class for notification backends."""

    @abstractmethod
    def send(self, email: NotificationEmail) -> None:
        """
        Sends a single notification email.

        Args:
            email: The composed notification.

        Raises:
            NotificationError: If the backend rejects or fails the send.
        """
