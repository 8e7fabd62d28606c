"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        """
        Uploads a file to storage under exactly ``object_name``.

        Args:
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Returns:
            The public URL of the stored object.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def ensure_public_bucket(self) -> None:
        """
        Ensures the bucket exists and its voicemail objects are publicly readable.

        Raises:
            StorageConfigurationError: If the bucket cannot be set up.
        """
