import logging
from typing import Optional
from urllib.parse import quote, unquote, urlparse
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import StorageError
from .models import StoredObject

logger = logging.getLogger(__name__)

S3_HOST_SUFFIX = ".s3.amazonaws.com"


def public_url_for(bucket: str, key: str) -> str:
    """Virtual-hosted S3 URL for an object."""
    return f"https://{bucket}{S3_HOST_SUFFIX}/{quote(key)}"


def parse_public_url(url: str) -> Optional[StoredObject]:
    """
    Recover bucket and key from a URL produced by public_url_for.

    Returns None for URLs that do not point at S3.
    """
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if not host.endswith(S3_HOST_SUFFIX):
        return None

    bucket = host[:-len(S3_HOST_SUFFIX)]
    key = unquote(parsed.path.lstrip("/"))
    if not bucket or not key:
        return None
    return StoredObject(bucket=bucket, key=key, public_url=url)


class S3ObjectStore:
    """Service for persisting uploaded images to an S3 bucket."""

    def __init__(self, bucket: str, region_name: str = "us-east-2", client=None):
        """
        Initialize the store with an S3 client.

        Args:
            bucket: Target bucket name
            region_name: AWS region for the default client
            client: Optional pre-built boto3 S3 client
        """
        self.bucket = bucket
        self.s3_client = client or boto3.client("s3", region_name=region_name)
        logger.info(f"S3ObjectStore initialized with bucket: {self.bucket}")

    def store(self, filename: str, data: bytes) -> str:
        """
        Write the upload under its original filename and return its public URL.

        Existing objects with the same key are overwritten.

        Args:
            filename: Original upload filename, used verbatim as the key
            data: Raw file bytes

        Returns:
            Publicly addressable URL of the stored object

        Raises:
            StorageError: If the write fails
        """
        if not self.bucket:
            raise StorageError("No storage bucket configured")

        try:
            self.s3_client.put_object(Bucket=self.bucket, Key=filename, Body=data)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 put_object failed for {self.bucket}/{filename}: {str(e)}")
            raise StorageError(f"Failed to store {filename}: {str(e)}") from e

        public_url = public_url_for(self.bucket, filename)
        logger.info(f"Stored {len(data)} bytes at {public_url}")
        return public_url
