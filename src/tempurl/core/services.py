"""Core domain services for tempurl."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from tempurl.core.exceptions import FetchError, ResourceNotFoundError
from tempurl.core.models import to_duration
from tempurl.core.path_utils import normalize_path
from tempurl.core.ports import NullProgressReporter


if TYPE_CHECKING:
    from tempurl.config import ServiceConfig
    from tempurl.core.models import ExpiringLink
    from tempurl.core.ports import (
        ClockPort,
        FetcherPort,
        LinkIssuerPort,
        ProgressReporter,
        ResourceCachePort,
    )


logger = logging.getLogger(__name__)

DEFAULT_EXPIRY = timedelta(hours=1)


class TemporaryUrlService:
    """Fetches resources once, caches them, and issues temporary URLs.

    Each call to temporary_url() walks the same steps: check the cache,
    fetch and store on a miss, then issue a link that expires a fixed
    duration after the clock's current instant. The clock is read exactly
    once per call, so a test that freezes the clock can rebuild the same
    link independently and compare by equality.

    Example:
        >>> clock = Clock()
        >>> service = TemporaryUrlService(
        ...     cache=MemoryCache(),
        ...     fetcher=HttpFetcher("https://images.example.com"),
        ...     issuer=SignedLinkIssuer("https://app.example.com/files", "secret"),
        ...     clock=clock,
        ... )
        >>> link = service.temporary_url("avatars/42.png")
        >>> link.url
        'https://app.example.com/files/avatars/42.png?expires=...&signature=...'
    """

    def __init__(
        self,
        cache: ResourceCachePort,
        fetcher: FetcherPort,
        issuer: LinkIssuerPort,
        clock: ClockPort,
        default_expiry: timedelta | int = DEFAULT_EXPIRY,
        progress: ProgressReporter | None = None,
    ) -> None:
        self._cache = cache
        self._fetcher = fetcher
        self._issuer = issuer
        self._clock = clock
        self._default_expiry = to_duration(default_expiry)
        self._progress = progress or NullProgressReporter()

    @classmethod
    def from_config(
        cls,
        config: ServiceConfig,
        clock: ClockPort | None = None,
        directory: Path | None = None,
        progress: ProgressReporter | None = None,
    ) -> TemporaryUrlService:
        """Create a service with default adapters wired from configuration.

        Args:
            config: Validated service configuration.
            clock: Clock to use. Defaults to a wall-clock Clock.
            directory: Start directory for project root discovery when
                config.cache_dir is relative (defaults to cwd).
            progress: Optional progress reporter for fetches.

        Returns:
            Service backed by FileCache, a scheme-routed fetcher and a
            SignedLinkIssuer.
        """
        from tempurl.adapters.cache import FileCache
        from tempurl.adapters.clock import Clock
        from tempurl.adapters.fetchers import create_fetcher
        from tempurl.adapters.links import SignedLinkIssuer
        from tempurl.config import find_project_root

        cache_dir = Path(config.cache_dir)
        if not cache_dir.is_absolute():
            cache_dir = find_project_root(directory) / cache_dir

        return cls(
            cache=FileCache(cache_dir),
            fetcher=create_fetcher(
                config.origin,
                timeout=config.fetch_timeout,
                max_attempts=config.fetch_attempts,
            ),
            issuer=SignedLinkIssuer(config.link_base_url, config.secret),
            clock=clock or Clock(),
            default_expiry=config.default_expiry,
            progress=progress,
        )

    @property
    def default_expiry(self) -> timedelta:
        """Lifetime of links issued without an explicit expires_in."""
        return self._default_expiry

    def temporary_url(
        self,
        path: str,
        expires_in: timedelta | int | None = None,
    ) -> ExpiringLink:
        """Return a temporary URL for a resource, fetching it on first use.

        Args:
            path: Logical path of the resource.
            expires_in: Link lifetime as seconds or timedelta. Defaults to
                the service's default_expiry.

        Returns:
            ExpiringLink valid until now + expires_in.

        Raises:
            InvalidPathError: If path is empty or contains relative segments.
            ValueError: If expires_in is not positive.
            ResourceNotFoundError: If the resource is not cached and the
                origin cannot supply it.
            CacheWriteError: If fetched content could not be stored.
        """
        duration = (
            self._default_expiry if expires_in is None else to_duration(expires_in)
        )
        key = normalize_path(path)

        self._ensure_cached(key)

        expires_at = self._clock.now() + duration
        link = self._issuer.issue(key, expires_at)
        logger.info("Issued temporary URL for %s expiring at %d", key, link.expires)
        return link

    def ensure_cached(self, path: str) -> bool:
        """Make sure a resource is cached without issuing a link.

        Args:
            path: Logical path of the resource.

        Returns:
            True if the resource was fetched by this call, False if it was
            already cached.

        Raises:
            ResourceNotFoundError: If the origin cannot supply the resource.
            CacheWriteError: If fetched content could not be stored.
        """
        return self._ensure_cached(normalize_path(path))

    def verify(self, url: str) -> str:
        """Verify a temporary URL against the current instant.

        Args:
            url: A URL previously returned by temporary_url().

        Returns:
            The logical path the URL grants access to.

        Raises:
            InvalidSignatureError: If the URL was tampered with.
            ExpiredLinkError: If the URL has expired.
        """
        return self._issuer.verify(url, self._clock.now())

    def _ensure_cached(self, key: str) -> bool:
        if self._cache.exists(key):
            logger.debug("Cache hit for %s", key)
            return False

        logger.debug("Cache miss for %s, fetching from origin", key)
        callback = self._progress.start_task(key, 0)
        try:
            content = self._fetcher.fetch(key, callback)
        except FetchError as e:
            logger.warning("Could not fetch %s from %s: %s", key, e.source, e)
            raise ResourceNotFoundError(key) from e
        finally:
            self._progress.finish_task(key)

        self._cache.put(key, content)
        logger.debug("Stored %d bytes for %s", len(content), key)
        return True
