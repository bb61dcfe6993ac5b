"""S3 fetcher adapter using boto3."""

from __future__ import annotations

from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import ClientError

from tempurl.core.exceptions import ConfigurationError, FetchError
from tempurl.core.path_utils import join_url


if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client

    from tempurl.core.ports import ProgressCallback


# Chunk size for streaming downloads (64KB)
_CHUNK_SIZE = 64 * 1024


def parse_s3_uri(uri: str) -> tuple[str, str]:
    """Parse an S3 URI into bucket and key prefix.

    Args:
        uri: S3 URI in format s3://bucket/ or s3://bucket/prefix/.

    Returns:
        Tuple of (bucket, key_prefix). The prefix may be empty.

    Raises:
        ConfigurationError: If the URI is not a valid S3 URI.
    """
    if not uri.startswith("s3://"):
        raise ConfigurationError(f"Invalid S3 URI: {uri}")

    bucket, _, key_prefix = uri[5:].partition("/")
    if not bucket:
        raise ConfigurationError(f"Invalid S3 URI (missing bucket): {uri}")

    return bucket, key_prefix.strip("/")


class S3Fetcher:
    """Fetcher downloading resources from an S3 origin.

    Implements FetcherPort. The object key is the base URI's prefix joined
    with the logical path.
    """

    def __init__(self, base_uri: str, client: S3Client | None = None) -> None:
        """Initialize S3 fetcher.

        Args:
            base_uri: Origin as s3://bucket/optional/prefix.
            client: Optional boto3 S3 client. If not provided, creates a default client.
        """
        self.base_uri = base_uri
        self.bucket, self.prefix = parse_s3_uri(base_uri)
        self._client = client or boto3.client("s3")

    def _key(self, path: str) -> str:
        return join_url(self.prefix, path) if self.prefix else path

    def fetch(self, path: str, progress: ProgressCallback | None = None) -> bytes:
        """Download an object with progress reporting.

        Raises:
            FetchError: If the object is missing, access is denied, or S3 fails.
        """
        key = self._key(path)
        source = f"s3://{self.bucket}/{key}"
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            raise FetchError(
                f"S3 error ({code}) for {source}",
                path=path,
                source=source,
                cause=e,
            ) from e

        total_size = response["ContentLength"]
        body = response["Body"]

        chunks: list[bytes] = []
        bytes_downloaded = 0
        for chunk in iter(lambda: body.read(_CHUNK_SIZE), b""):
            chunks.append(chunk)
            bytes_downloaded += len(chunk)
            if progress:
                progress(bytes_downloaded, total_size)

        return b"".join(chunks)
