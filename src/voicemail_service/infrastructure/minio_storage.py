"""MinIO implementation of the StorageClient interface."""

import json
from typing import BinaryIO
from urllib.parse import quote

from minio import Minio

from voicemail_service.domain.voicemail import OBJECT_PREFIX
from voicemail_service.exceptions import StorageConfigurationError, StorageUploadError
from voicemail_service.interfaces import StorageClient
from voicemail_service.logging import setup_logging

logger = setup_logging()


def public_read_policy(bucket_name: str, prefix: str = OBJECT_PREFIX) -> str:
    """Returns a bucket policy granting anonymous reads under ``prefix``."""
    return json.dumps(
        {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Effect": "Allow",
                    "Principal": {"AWS": ["*"]},
                    "Action": ["s3:GetObject"],
                    "Resource": [f"arn:aws:s3:::{bucket_name}/{prefix}/*"],
                }
            ],
        }
    )


class MinioStorage(StorageClient):
    """Handles file storage operations using MinIO."""

    def __init__(self, client: Minio, bucket_name: str, public_base_url: str):
        self._client = client
        self._bucket_name = bucket_name
        self._public_base_url = public_base_url.rstrip("/")

    def public_url(self, object_name: str) -> str:
        return f"{self._public_base_url}/{self._bucket_name}/{quote(object_name)}"

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "object_name": object_name,
                    "size": size,
                    "bucket": self._bucket_name,
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e
        return self.public_url(object_name)

    def ensure_public_bucket(self) -> None:
        try:
            if not self._client.bucket_exists(bucket_name=self._bucket_name):
                self._client.make_bucket(bucket_name=self._bucket_name)
                logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
            else:
                logger.info(
                    "Bucket already exists", extra={"bucket_name": self._bucket_name}
                )
            self._client.set_bucket_policy(
                bucket_name=self._bucket_name,
                policy=public_read_policy(self._bucket_name),
            )
        except Exception as e:
            logger.exception(
                "MinIO bucket setup failed",
                extra={"bucket_name": self._bucket_name},
            )
            raise StorageConfigurationError(self._bucket_name, e) from e
