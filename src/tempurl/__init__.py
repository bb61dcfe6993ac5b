"""tempurl - Fetch remote resources once, cache them, and issue temporary URLs.

The first request for a path fetches the resource from its origin and
stores it in a cache. Every request returns a signed URL that expires a
fixed duration after the current instant, read from an injectable Clock
that tests can freeze.

Example:
    >>> from tempurl import Clock, MemoryCache, HttpFetcher, SignedLinkIssuer
    >>> from tempurl import TemporaryUrlService
    >>> clock = Clock()
    >>> service = TemporaryUrlService(
    ...     cache=MemoryCache(),
    ...     fetcher=HttpFetcher("https://images.example.com"),
    ...     issuer=SignedLinkIssuer("https://app.example.com/files", "secret"),
    ...     clock=clock,
    ... )
    >>> with clock.frozen(1737729800):
    ...     link = service.temporary_url("test/image")
    >>> link.expires
    1737733400
"""

import logging

from tempurl.adapters.cache import FileCache, MemoryCache, S3Cache
from tempurl.adapters.clock import Clock
from tempurl.adapters.fetchers import (
    FilesystemFetcher,
    HttpFetcher,
    S3Fetcher,
    create_fetcher,
)
from tempurl.adapters.links import SignedLinkIssuer
from tempurl.config import ServiceConfig, find_project_root
from tempurl.core.exceptions import (
    CacheError,
    CacheMissError,
    CacheWriteError,
    ClockNotFrozenError,
    ConfigurationError,
    ExpiredLinkError,
    FetchError,
    InvalidPathError,
    InvalidSignatureError,
    LinkError,
    NotFoundError,
    ResourceNotFoundError,
    TempurlError,
)
from tempurl.core.models import CacheStatistics, ExpiringLink, to_instant
from tempurl.core.path_utils import normalize_path
from tempurl.core.ports import (
    ClockPort,
    FetcherPort,
    LinkIssuerPort,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    ResourceCachePort,
)
from tempurl.core.services import TemporaryUrlService
from tempurl.log import configure_logging
from tempurl.progress import RichProgressReporter


logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CacheError",
    "CacheMissError",
    "CacheStatistics",
    "CacheWriteError",
    "Clock",
    "ClockNotFrozenError",
    "ClockPort",
    "ConfigurationError",
    "ExpiredLinkError",
    "ExpiringLink",
    "FetchError",
    "FetcherPort",
    "FileCache",
    "FilesystemFetcher",
    "HttpFetcher",
    "InvalidPathError",
    "InvalidSignatureError",
    "LinkError",
    "LinkIssuerPort",
    "MemoryCache",
    "NotFoundError",
    "NullProgressReporter",
    "ProgressCallback",
    "ProgressReporter",
    "ResourceCachePort",
    "ResourceNotFoundError",
    "RichProgressReporter",
    "S3Cache",
    "S3Fetcher",
    "ServiceConfig",
    "SignedLinkIssuer",
    "TempurlError",
    "TemporaryUrlService",
    "__version__",
    "configure_logging",
    "create_fetcher",
    "find_project_root",
    "normalize_path",
    "to_instant",
]
