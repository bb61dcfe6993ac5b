"""URI scheme-based selection of a fetcher for an origin address."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tempurl.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from tempurl.core.ports import FetcherPort


def parse_uri_scheme(uri: str) -> str | None:
    """Extract the URI scheme from an origin string.

    Args:
        uri: Origin URI or file path.

    Returns:
        The scheme (e.g., 'https', 's3', 'file') or None for local paths.
    """
    if "://" in uri:
        scheme = uri.split("://", 1)[0]
        # Avoid confusing Windows drive letters (C:) with schemes
        if len(scheme) > 1:
            return scheme.lower()
    return None


def strip_file_scheme(uri: str) -> str:
    """Strip file:// prefix from URI, returning plain path."""
    if uri.startswith("file://"):
        return uri[7:]  # len("file://") == 7
    return uri


def create_fetcher(
    origin: str,
    s3_client: Any | None = None,
    **http_options: Any,
) -> FetcherPort:
    """Create the fetcher matching an origin address.

    Args:
        origin: Base address, e.g. "https://cdn.example.com/assets",
            "s3://bucket/prefix", "file:///srv/assets" or "/srv/assets".
        s3_client: Optional boto3 S3 client for s3:// origins.
        **http_options: Passed to HttpFetcher (timeout, max_attempts, ...)
            for http(s) origins.

    Returns:
        HttpFetcher, S3Fetcher, or FilesystemFetcher.

    Raises:
        ConfigurationError: If the scheme is not supported.
    """
    from tempurl.adapters.fetchers import FilesystemFetcher, HttpFetcher, S3Fetcher

    scheme = parse_uri_scheme(origin)
    if scheme in ("http", "https"):
        return HttpFetcher(origin, **http_options)
    if scheme == "s3":
        return S3Fetcher(origin, client=s3_client)
    if scheme in ("file", None):
        return FilesystemFetcher(strip_file_scheme(origin))
    raise ConfigurationError(f"No fetcher available for scheme '{scheme}'")
