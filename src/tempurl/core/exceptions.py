"""Domain exceptions for tempurl.

All library errors inherit from TempurlError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from datetime import datetime


class TempurlError(Exception):
    """Base class for all tempurl exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(TempurlError):
    """Raised for configuration problems (missing or invalid settings)."""

    pass


class InvalidPathError(TempurlError, ValueError):
    """Raised when a logical path is empty or escapes its root.

    Attributes:
        path: The raw path as supplied by the caller.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid resource path '{path}': {reason}")

    @property
    def recovery_hint(self) -> str:
        """Describe what a valid path looks like."""
        return "Use a non-empty relative path such as 'images/logo.png'"


class NotFoundError(TempurlError):
    """Base class for errors about a resource that does not exist.

    Attributes:
        path: The logical path that could not be found.
    """

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"Resource '{path}' not found")


class CacheMissError(NotFoundError):
    """Raised by a cache when get() is called for a path it does not hold."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Resource '{path}' is not cached")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking exists() first."""
        return "Call exists() before get(), or fetch the resource first"


class ResourceNotFoundError(NotFoundError):
    """Raised when a resource is neither cached nor available from its origin."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path at the origin."""
        return f"Verify that '{self.path}' exists at the configured origin"


class FetchError(TempurlError):
    """Raised when a resource cannot be retrieved from its origin.

    Attributes:
        path: The logical path being fetched.
        source: The remote address that was requested.
        status_code: HTTP status code, if the origin answered.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: str,
        source: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.source = source
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the origin."""
        if self.status_code is not None:
            return f"Origin answered {self.status_code} for {self.source}"
        return f"Check that the origin is reachable: {self.source}"


class CacheError(TempurlError):
    """Base class for cache-related errors."""

    pass


class CacheWriteError(CacheError):
    """Raised when content cannot be persisted to the cache.

    Attributes:
        path: The logical path being written.
        cause: The underlying exception, if any.
    """

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write '{path}' to cache")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking cache permissions."""
        return "Check that the cache location is writable"


class LinkError(TempurlError):
    """Base class for temporary link verification errors."""

    pass


class InvalidSignatureError(LinkError):
    """Raised when a link was not issued by this issuer or was tampered with."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid link signature: {url}")


class ExpiredLinkError(LinkError):
    """Raised when a correctly signed link is past its expiration.

    Attributes:
        path: Logical path the link points to.
        expires_at: The instant the link stopped being valid.
    """

    def __init__(self, path: str, expires_at: datetime) -> None:
        self.path = path
        self.expires_at = expires_at
        super().__init__(f"Link for '{path}' expired at {expires_at.isoformat()}")

    @property
    def recovery_hint(self) -> str:
        """Suggest requesting a new link."""
        return "Request a new temporary URL"


class ClockNotFrozenError(TempurlError):
    """Raised when advancing a clock that is reading wall-clock time."""

    @property
    def recovery_hint(self) -> str:
        """Suggest freezing the clock first."""
        return "Call freeze() before advance()"
