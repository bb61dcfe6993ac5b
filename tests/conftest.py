"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures and in-memory test doubles for the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tempurl.adapters.cache import MemoryCache
from tempurl.adapters.clock import Clock
from tempurl.adapters.links import SignedLinkIssuer
from tempurl.core.exceptions import FetchError


if TYPE_CHECKING:
    from collections.abc import Iterator

    from tempurl.core.ports import ProgressCallback


FROZEN_AT = 1737729800
LINK_BASE_URL = "https://app.example.test/files"
LINK_SECRET = "test-signing-secret"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "clock: Clock adapter")
    config.addinivalue_line("markers", "cache: Resource cache adapters")
    config.addinivalue_line("markers", "fetcher: External fetcher adapters")
    config.addinivalue_line("markers", "links: Link issuer adapters")
    config.addinivalue_line("markers", "progress: Rich progress integration")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow)",
    )


class FakeFetcher:
    """In-memory fetcher that records every requested path.

    Paths present in resources are returned; anything else raises
    FetchError, as a real origin answering 404 would.
    """

    def __init__(self, resources: dict[str, bytes] | None = None) -> None:
        self.resources = dict(resources or {})
        self.calls: list[str] = []

    def fetch(self, path: str, progress: ProgressCallback | None = None) -> bytes:
        self.calls.append(path)
        try:
            content = self.resources[path]
        except KeyError:
            raise FetchError(
                f"Origin returned 404 for {path}",
                path=path,
                source=f"fake://origin/{path}",
                status_code=404,
            ) from None
        if progress:
            progress(len(content), len(content))
        return content


class RecordingCache(MemoryCache):
    """MemoryCache that records put() calls."""

    def __init__(self, entries: dict[str, bytes] | None = None) -> None:
        super().__init__(entries)
        self.puts: list[str] = []

    def put(self, path: str, content: bytes) -> None:
        self.puts.append(path)
        super().put(path, content)


@pytest.fixture
def clock() -> Iterator[Clock]:
    """A Clock that is guaranteed to be unfrozen after the test."""
    test_clock = Clock()
    yield test_clock
    test_clock.unfreeze()


@pytest.fixture
def frozen_clock(clock: Clock) -> Clock:
    """A Clock frozen at FROZEN_AT."""
    clock.freeze(FROZEN_AT)
    return clock


@pytest.fixture
def issuer() -> SignedLinkIssuer:
    """Link issuer with fixed test configuration."""
    return SignedLinkIssuer(LINK_BASE_URL, LINK_SECRET)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """Fetcher double serving "external-image-content" for "test/image"."""
    return FakeFetcher({"test/image": b"external-image-content"})


@pytest.fixture
def recording_cache() -> RecordingCache:
    """Empty in-memory cache that records writes."""
    return RecordingCache()
