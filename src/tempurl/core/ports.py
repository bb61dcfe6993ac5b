"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from datetime import datetime

    from tempurl.core.models import CacheStatistics, ExpiringLink

ProgressCallback = Callable[[int, int], None]


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current instant as a UTC whole-second datetime."""
        ...


@runtime_checkable
class ResourceCachePort(Protocol):
    """Content store keyed by logical path."""

    def exists(self, path: str) -> bool:
        """Check whether content is stored for path. Has no side effects."""
        ...

    def get(self, path: str) -> bytes:
        """Return the content stored for path.

        Raises:
            CacheMissError: If nothing is stored for path.
        """
        ...

    def put(self, path: str, content: bytes) -> None:
        """Create or overwrite the content stored for path.

        Writes are atomic: a reader sees either the old or the new content.

        Raises:
            CacheWriteError: If the content could not be persisted.
        """
        ...

    def invalidate(self, path: str) -> None:
        """Remove the content stored for path, if any."""
        ...

    def list_all_keys(self) -> list[str]:
        """List all cached paths, sorted alphabetically."""
        ...

    def statistics(self) -> CacheStatistics:
        """Return entry count and total size of cached content."""
        ...


@runtime_checkable
class FetcherPort(Protocol):
    """Retrieves resources by logical path from an external origin."""

    def fetch(self, path: str, progress: ProgressCallback | None = None) -> bytes:
        """Retrieve the resource at base address joined with path.

        Args:
            path: Normalized logical path.
            progress: Optional callback function(bytes_received, total_bytes).

        Returns:
            The resource content.

        Raises:
            FetchError: For any non-success outcome (missing resource,
                error response, network failure).
        """
        ...


@runtime_checkable
class LinkIssuerPort(Protocol):
    """Produces time-bounded access references for cached resources.

    Implementations must be pure functions of their arguments and their
    configuration. They never read a clock.
    """

    def issue(self, path: str, expires_at: datetime) -> ExpiringLink:
        """Build a link to path that is valid until expires_at."""
        ...

    def verify(self, url: str, now: datetime) -> str:
        """Check a link issued by this issuer and return its logical path.

        Raises:
            InvalidSignatureError: If the link was not issued by this issuer.
            ExpiredLinkError: If now is at or past the link's expiration.
        """
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Reports fetch progress to the user.

    The core domain uses this to report progress without depending
    on any specific UI library.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Start tracking a fetch.

        Args:
            name: Logical path being fetched.
            total: Total bytes expected, or 0 when unknown.

        Returns:
            A ProgressCallback to call with (bytes_received, total_bytes).
        """
        ...

    def finish_task(self, name: str) -> None:
        """Mark a fetch as complete."""
        ...


class NullProgressReporter:
    """A ProgressReporter that produces no output.

    Used as the default when no progress reporting is desired.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:  # noqa: ARG002
        """Return a no-op callback."""
        return lambda _received, _total: None

    def finish_task(self, name: str) -> None:
        """Do nothing."""
        _ = name
