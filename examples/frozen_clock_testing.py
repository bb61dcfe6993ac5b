"""Deterministic links in tests with a frozen clock.

Freezing the clock pins the instant the service reads, so a test can
compute the expected link independently and compare by equality.
"""

from datetime import timedelta

from tempurl import (
    Clock,
    MemoryCache,
    SignedLinkIssuer,
    TemporaryUrlService,
    to_instant,
)


class StaticFetcher:
    """Fetcher returning fixed content for every path."""

    def __init__(self, content: bytes) -> None:
        self.content = content

    def fetch(self, path, progress=None) -> bytes:
        return self.content


clock = Clock()
issuer = SignedLinkIssuer("https://app.example.com/files", "test-secret")
cache = MemoryCache()
service = TemporaryUrlService(
    cache=cache,
    fetcher=StaticFetcher(b"external-image-content"),
    issuer=issuer,
    clock=clock,
)

with clock.frozen(1737729800):
    link = service.temporary_url("test/image")

    # Same inputs, same link
    expected = issuer.issue("test/image", to_instant(1737729800 + 3600))
    assert link == expected
    assert cache.get("test/image") == b"external-image-content"

    # Moving time forward changes only the expiration
    clock.advance(timedelta(minutes=30))
    later = service.temporary_url("test/image")
    assert later.expires == link.expires + 1800

print(f"Link: {link.url}")
