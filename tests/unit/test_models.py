"""Unit tests for core domain models."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tempurl.core.models import (
    CacheStatistics,
    ExpiringLink,
    epoch_seconds,
    to_duration,
    to_instant,
)


@pytest.mark.core
@pytest.mark.tier(0)
class TestToInstant:
    """Tests for to_instant()."""

    def test_from_epoch_seconds(self) -> None:
        """Integer timestamps should become UTC datetimes."""
        assert to_instant(1737729800) == datetime(2025, 1, 24, 14, 43, 20, tzinfo=UTC)

    def test_converts_other_timezones_to_utc(self) -> None:
        """Aware datetimes in other zones should be converted to UTC."""
        plus_two = timezone(timedelta(hours=2))
        instant = to_instant(datetime(2025, 1, 24, 16, 43, 20, tzinfo=plus_two))

        assert instant == datetime(2025, 1, 24, 14, 43, 20, tzinfo=UTC)
        assert instant.tzinfo == UTC

    def test_truncates_fractional_epoch(self) -> None:
        """Fractional timestamps should drop sub-second precision."""
        assert to_instant(1737729800.9) == to_instant(1737729800)

    def test_epoch_seconds_roundtrip(self) -> None:
        """epoch_seconds() should invert to_instant() for whole seconds."""
        assert epoch_seconds(to_instant(1737733400)) == 1737733400


@pytest.mark.core
@pytest.mark.tier(0)
class TestToDuration:
    """Tests for to_duration()."""

    def test_seconds_become_timedelta(self) -> None:
        """Integer seconds should become a timedelta."""
        assert to_duration(3600) == timedelta(hours=1)

    def test_timedelta_passes_through(self) -> None:
        """A timedelta should be returned unchanged."""
        assert to_duration(timedelta(minutes=5)) == timedelta(minutes=5)

    @pytest.mark.parametrize("value", [0, -5, timedelta(seconds=-1)])
    def test_non_positive_rejected(self, value) -> None:
        """Zero or negative durations should raise ValueError."""
        with pytest.raises(ValueError, match="positive"):
            to_duration(value)


@pytest.mark.core
@pytest.mark.tier(0)
class TestExpiringLink:
    """Tests for ExpiringLink."""

    def _link(self, expires: int = 1737733400) -> ExpiringLink:
        return ExpiringLink(
            path="test/image",
            url=f"https://app.example.test/files/test/image?expires={expires}",
            expires_at=to_instant(expires),
        )

    def test_expires_is_epoch_seconds(self) -> None:
        """expires should expose the expiration as an integer."""
        assert self._link().expires == 1737733400

    def test_str_is_url(self) -> None:
        """str() of a link should be its URL."""
        link = self._link()
        assert str(link) == link.url

    def test_equal_links_compare_equal(self) -> None:
        """Links built from the same values should be equal."""
        assert self._link() == self._link()

    def test_is_frozen(self) -> None:
        """ExpiringLink should be immutable."""
        from dataclasses import FrozenInstanceError

        link = self._link()
        with pytest.raises(FrozenInstanceError):
            link.url = "changed"  # type: ignore[misc]

    def test_is_expired_before_and_at_expiry(self) -> None:
        """is_expired() should flip exactly at expires_at."""
        link = self._link()

        assert link.is_expired(to_instant(1737733399)) is False
        assert link.is_expired(to_instant(1737733400)) is True

    @pytest.mark.parametrize("field", ["path", "url"])
    def test_empty_fields_rejected(self, field: str) -> None:
        """path and url must be non-empty."""
        values = {"path": "a", "url": "https://x/a", "expires_at": to_instant(0)}
        values[field] = ""

        with pytest.raises(ValueError, match=field):
            ExpiringLink(**values)


@pytest.mark.core
@pytest.mark.tier(0)
def test_cache_statistics_defaults_to_empty() -> None:
    """CacheStatistics should default to zero entries and bytes."""
    stats = CacheStatistics()
    assert stats.entry_count == 0
    assert stats.total_size == 0
