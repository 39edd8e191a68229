import logging
from typing import Any

import boto3
from botocore.client import Config

from app.core.config import Settings

logger = logging.getLogger(__name__)


class StorageConfigurationError(RuntimeError):
    """Raised when the storage credentials or namespace are not configured."""


class StorageService:
    """Issues presigned upload URLs for objects in the configured R2 bucket."""

    def __init__(self, settings: Settings, client: Any | None = None) -> None:
        self.settings = settings
        self.bucket = settings.r2_bucket_name
        self._client = client

    @property
    def endpoint_url(self) -> str:
        return f"https://{self.settings.r2_account_id}.{self.settings.r2_storage_domain}"

    @property
    def client(self) -> Any:
        if self._client is None:
            self._check_configured()
            session = boto3.session.Session()
            self._client = session.client(
                "s3",
                endpoint_url=self.endpoint_url,
                aws_access_key_id=self.settings.r2_access_key_id,
                aws_secret_access_key=self.settings.r2_secret_access_key.get_secret_value(),
                region_name=self.settings.r2_region,
                config=Config(
                    signature_version="s3v4",
                    s3={"addressing_style": "path"},
                    request_checksum_calculation="when_required",
                ),
            )
        return self._client

    def _check_configured(self) -> None:
        settings = self.settings
        if not settings.r2_access_key_id or not settings.r2_secret_access_key.get_secret_value():
            raise StorageConfigurationError("Storage credentials are not configured")
        if not settings.r2_account_id or not settings.r2_bucket_name:
            raise StorageConfigurationError("Storage account id or bucket name is not configured")

    def create_presigned_put(self, filename: str) -> str:
        # The filename is the object key as given; botocore only escapes it for the URL.
        upload_url = self.client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": self.bucket,
                "Key": filename,
                "ContentType": self.settings.upload_content_type,
            },
            ExpiresIn=self.settings.upload_url_ttl,
        )
        logger.debug(
            "Issued upload URL for %s/%s/%s (expires in %ss)",
            self.endpoint_url,
            self.bucket,
            filename,
            self.settings.upload_url_ttl,
        )
        return upload_url


_storage_service: StorageService | None = None


def get_storage_service(settings: Settings) -> StorageService:
    global _storage_service
    if _storage_service is None or _storage_service.settings is not settings:
        _storage_service = StorageService(settings)
    return _storage_service


def reset_storage_service() -> None:
    global _storage_service
    _storage_service = None
