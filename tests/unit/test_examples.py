"""Tests validating that example code patterns work correctly.

These tests ensure the examples in the examples/ directory represent
working, copy-pasteable code patterns.
"""

from datetime import timedelta
from pathlib import Path

import pytest

from tempurl import (
    Clock,
    ExpiredLinkError,
    FileCache,
    FilesystemFetcher,
    InvalidPathError,
    NotFoundError,
    ServiceConfig,
    SignedLinkIssuer,
    TemporaryUrlService,
    to_instant,
)


def _service(tmp_path: Path, clock: Clock) -> TemporaryUrlService:
    origin = tmp_path / "assets"
    (origin / "avatars").mkdir(parents=True)
    (origin / "avatars" / "42.png").write_bytes(b"png bytes")
    return TemporaryUrlService(
        cache=FileCache(tmp_path / "cache"),
        fetcher=FilesystemFetcher(origin),
        issuer=SignedLinkIssuer("https://app.example.com/files", "change-me"),
        clock=clock,
    )


@pytest.mark.e2e
class TestBasicUsage:
    """Tests for basic_usage.py example pattern."""

    def test_first_request_caches_then_verifies(self, tmp_path: Path, clock) -> None:
        """The first call caches the resource and the link verifies."""
        service = _service(tmp_path, clock)

        link = service.temporary_url("avatars/42.png")

        assert FileCache(tmp_path / "cache").get("avatars/42.png") == b"png bytes"
        assert service.verify(link.url) == "avatars/42.png"

    def test_from_config_with_local_origin(self, tmp_path: Path, clock) -> None:
        """from_config() wires a filesystem origin and absolute cache_dir."""
        origin = tmp_path / "assets"
        origin.mkdir()
        (origin / "a.txt").write_bytes(b"a")
        config = ServiceConfig(
            origin=f"file://{origin}",
            link_base_url="https://app.example.com/files",
            secret="change-me",
            cache_dir=tmp_path / "cache",
        )

        service = TemporaryUrlService.from_config(config, clock=clock)
        service.temporary_url("a.txt")

        assert FileCache(tmp_path / "cache").get("a.txt") == b"a"


@pytest.mark.e2e
class TestErrorHandling:
    """Tests for error_handling.py example pattern."""

    def test_missing_resource_has_hint(self, tmp_path: Path, clock) -> None:
        service = _service(tmp_path, clock)

        with pytest.raises(NotFoundError) as exc_info:
            service.temporary_url("missing/image")

        assert exc_info.value.path == "missing/image"
        assert exc_info.value.recovery_hint

    def test_escaping_path_rejected(self, tmp_path: Path, clock) -> None:
        service = _service(tmp_path, clock)

        with pytest.raises(InvalidPathError):
            service.temporary_url("../etc/passwd")

    def test_expired_link_detected(self, tmp_path: Path, clock) -> None:
        service = _service(tmp_path, clock)
        clock.freeze(1737729800)
        link = service.temporary_url("avatars/42.png", expires_in=60)

        clock.advance(60)

        with pytest.raises(ExpiredLinkError):
            service.verify(link.url)


@pytest.mark.e2e
class TestFrozenClockTesting:
    """Tests for frozen_clock_testing.py example pattern."""

    def test_link_matches_independent_computation(self, tmp_path: Path, clock) -> None:
        service = _service(tmp_path, clock)
        issuer = SignedLinkIssuer("https://app.example.com/files", "change-me")

        with clock.frozen(1737729800):
            link = service.temporary_url("avatars/42.png")
            clock.advance(timedelta(minutes=30))
            later = service.temporary_url("avatars/42.png")

        assert link == issuer.issue("avatars/42.png", to_instant(1737733400))
        assert later.expires == link.expires + 1800
        assert not clock.is_frozen
