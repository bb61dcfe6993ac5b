"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from tempurl import (
    CacheWriteError,
    Clock,
    ExpiredLinkError,
    FileCache,
    FilesystemFetcher,
    InvalidPathError,
    InvalidSignatureError,
    NotFoundError,
    SignedLinkIssuer,
    TempurlError,
    TemporaryUrlService,
)


service = TemporaryUrlService(
    cache=FileCache(Path("./data/tempurl")),
    fetcher=FilesystemFetcher(Path("./assets")),
    issuer=SignedLinkIssuer("https://app.example.com/files", "change-me"),
    clock=Clock(),
)


# Pattern 1: Resources the origin does not have
def url_or_none(service: TemporaryUrlService, path: str) -> str | None:
    """Return a temporary URL, or None if the resource does not exist."""
    try:
        return service.temporary_url(path).url
    except NotFoundError as e:
        print(f"Not found: {e.path}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Reject bad input early
def url_for_user_input(service: TemporaryUrlService, raw: str) -> str | None:
    """Return a temporary URL for an untrusted path."""
    try:
        return service.temporary_url(raw).url
    except InvalidPathError as e:
        print(f"Rejected path: {e.reason}")
        return None


# Pattern 3: Verify incoming links on the serving side
def check_link(service: TemporaryUrlService, url: str) -> str | None:
    """Return the path a link grants access to, or None if it is unusable."""
    try:
        return service.verify(url)
    except ExpiredLinkError as e:
        print(f"Link expired at {e.expires_at.isoformat()}")
        print(f"Hint: {e.recovery_hint}")
        return None
    except InvalidSignatureError:
        print("Link was not issued by this service")
        return None


# Pattern 4: Catch-all for any library error
def url_safe(service: TemporaryUrlService, path: str) -> str | None:
    """Return a temporary URL with comprehensive error handling."""
    try:
        return service.temporary_url(path).url
    except CacheWriteError as e:
        # Nothing was issued; the cache must be fixed before retrying
        print(f"Cache write failed for {e.path}: {e.cause}")
        return None
    except TempurlError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return None


if __name__ == "__main__":
    url_or_none(service, "missing/image")
    url_for_user_input(service, "../etc/passwd")
    check_link(service, "https://app.example.com/files/a?expires=0&signature=x")
