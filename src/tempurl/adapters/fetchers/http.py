"""HTTP fetcher adapter built on httpx."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from tempurl.core.exceptions import FetchError
from tempurl.core.path_utils import join_url, quote_path


if TYPE_CHECKING:
    from types import TracebackType

    from tempurl.core.ports import ProgressCallback


logger = logging.getLogger(__name__)

# Chunk size for streaming downloads (64KB)
_CHUNK_SIZE = 64 * 1024


def _content_length(response: httpx.Response) -> int:
    """Return the declared body size, or 0 when missing or malformed."""
    try:
        return max(int(response.headers.get("content-length", 0)), 0)
    except ValueError:
        return 0


class _RetryableFetch(Exception):
    """Internal signal that an attempt failed in a way worth retrying."""

    def __init__(self, error: FetchError) -> None:
        self.error = error
        super().__init__(str(error))


class HttpFetcher:
    """Fetcher that GETs resources from an HTTP origin.

    Implements FetcherPort. The request address is base_url joined with
    the percent-quoted logical path. Any non-2xx response or transport
    failure is reported as FetchError.

    Transport errors and 5xx responses are retried up to max_attempts
    attempts in total; 4xx responses are final.

    Example:
        >>> with HttpFetcher("https://images.example.com") as fetcher:
        ...     content = fetcher.fetch("avatars/42.png")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        max_attempts: int = 1,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            base_url: Origin address the logical path is joined onto.
            timeout: Request timeout in seconds.
            max_attempts: Total attempts per fetch (1 means no retries).
            client: Optional preconfigured httpx client. Not closed by close().
            transport: Optional transport for a fetcher-owned client
                (e.g. httpx.MockTransport in tests).
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = base_url
        self.max_attempts = max_attempts
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def url_for(self, path: str) -> str:
        """Return the origin address for a logical path."""
        return join_url(self.base_url, quote_path(path))

    def fetch(self, path: str, progress: ProgressCallback | None = None) -> bytes:
        """GET a resource from the origin.

        Args:
            path: Normalized logical path.
            progress: Optional callback function(bytes_received, total_bytes).

        Returns:
            The response body.

        Raises:
            FetchError: If the origin cannot supply the resource.
        """
        url = self.url_for(path)

        attempt = 1
        while True:
            logger.debug("GET %s (attempt %d/%d)", url, attempt, self.max_attempts)
            try:
                return self._attempt(path, url, progress)
            except _RetryableFetch as retry:
                if attempt >= self.max_attempts:
                    raise retry.error from retry.error.cause
                logger.debug("Attempt %d for %s failed: %s", attempt, url, retry.error)
            attempt += 1

    def _attempt(
        self, path: str, url: str, progress: ProgressCallback | None
    ) -> bytes:
        try:
            with self._client.stream("GET", url) as response:
                if not response.is_success:
                    error = FetchError(
                        f"Origin returned {response.status_code} for {url}",
                        path=path,
                        source=url,
                        status_code=response.status_code,
                    )
                    if response.is_server_error:
                        raise _RetryableFetch(error)
                    raise error

                total = _content_length(response)
                chunks: list[bytes] = []
                received = 0
                for chunk in response.iter_bytes(_CHUNK_SIZE):
                    chunks.append(chunk)
                    received += len(chunk)
                    if progress:
                        progress(received, total or received)
                return b"".join(chunks)
        except httpx.HTTPError as e:
            raise _RetryableFetch(
                FetchError(
                    f"Request to {url} failed: {e}",
                    path=path,
                    source=url,
                    cause=e,
                )
            ) from e
