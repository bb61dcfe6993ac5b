"""S3 cache adapter using boto3."""

from __future__ import annotations

from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import ClientError

from tempurl.core.exceptions import CacheError, CacheMissError, CacheWriteError
from tempurl.core.models import CacheStatistics


if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client


_NOT_FOUND_CODES = ("404", "NoSuchKey", "NotFound")


class S3Cache:
    """Cache adapter storing content as objects in an S3 bucket.

    Each logical path maps to the key "{prefix}/{path}". S3 PUTs are
    atomic per object, so concurrent writers resolve to last-writer-wins.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        client: S3Client | None = None,
    ) -> None:
        """Initialize S3 cache.

        Args:
            bucket: Bucket holding cached objects.
            prefix: Optional key prefix, e.g. "cache/images".
            client: Optional boto3 S3 client. If not provided, creates a default client.
        """
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        self._client = client or boto3.client("s3")

    def _key(self, path: str) -> str:
        return f"{self.prefix}/{path}" if self.prefix else path

    def _path(self, key: str) -> str:
        return key[len(self.prefix) + 1 :] if self.prefix else key

    def exists(self, path: str) -> bool:
        """Check whether an object is stored for path.

        Raises:
            CacheError: For S3 errors other than a missing object.
        """
        try:
            self._client.head_object(Bucket=self.bucket, Key=self._key(path))
        except ClientError as e:
            if self._error_code(e) in _NOT_FOUND_CODES:
                return False
            raise self._translate_client_error(e, path) from e
        return True

    def get(self, path: str) -> bytes:
        """Download cached content.

        Raises:
            CacheMissError: If no object is stored for path.
            CacheError: For other S3 errors.
        """
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=self._key(path))
        except ClientError as e:
            raise self._translate_client_error(e, path) from e
        return response["Body"].read()

    def put(self, path: str, content: bytes) -> None:
        """Upload content for path, replacing any existing object.

        Raises:
            CacheWriteError: If the upload fails.
        """
        try:
            self._client.put_object(
                Bucket=self.bucket, Key=self._key(path), Body=content
            )
        except ClientError as e:
            raise CacheWriteError(path, cause=e) from e

    def invalidate(self, path: str) -> None:
        """Delete the object for path. Deleting a missing object is a no-op."""
        try:
            self._client.delete_object(Bucket=self.bucket, Key=self._key(path))
        except ClientError as e:
            raise self._translate_client_error(e, path) from e

    def _objects(self) -> list[tuple[str, int]]:
        paginator = self._client.get_paginator("list_objects_v2")
        list_prefix = f"{self.prefix}/" if self.prefix else ""
        results: list[tuple[str, int]] = []
        for page in paginator.paginate(Bucket=self.bucket, Prefix=list_prefix):
            for obj in page.get("Contents", []):
                results.append((obj["Key"], obj["Size"]))
        return results

    def list_all_keys(self) -> list[str]:
        """List all cached logical paths, sorted alphabetically."""
        return sorted(self._path(key) for key, _ in self._objects())

    def statistics(self) -> CacheStatistics:
        """Count cached objects and their combined size in bytes."""
        objects = self._objects()
        return CacheStatistics(
            entry_count=len(objects),
            total_size=sum(size for _, size in objects),
        )

    @staticmethod
    def _error_code(error: ClientError) -> str:
        return str(error.response.get("Error", {}).get("Code", ""))

    def _translate_client_error(
        self, error: ClientError, path: str
    ) -> CacheError | CacheMissError:
        """Translate botocore ClientError to domain exception.

        Args:
            error: The botocore ClientError.
            path: The logical path for context.

        Returns:
            CacheMissError for missing objects, CacheError otherwise.
        """
        code = self._error_code(error)
        if code in _NOT_FOUND_CODES:
            return CacheMissError(path)
        return CacheError(f"S3 error ({code}) for '{path}': {error}")
