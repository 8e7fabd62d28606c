"""Abstract interfaces for infrastructure dependencies."""

from .notifier import Notifier
from .storage import StorageClient

__all__ = ["StorageClient", "Notifier"]
