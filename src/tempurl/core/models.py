"""Core domain models for tempurl.

These models are pure Python dataclasses with no I/O dependencies.
Instants are timezone-aware UTC datetimes with whole-second resolution,
so anything derived from them (expiration timestamps, signed URLs) is
reproducible and comparable by equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta


def to_instant(value: datetime | int | float) -> datetime:
    """Normalize a datetime or epoch timestamp to a UTC whole-second instant.

    Naive datetimes are interpreted as UTC. Sub-second precision is dropped.

    Args:
        value: A datetime, or seconds since the Unix epoch.

    Returns:
        A timezone-aware UTC datetime with microsecond=0.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            dt = value.replace(tzinfo=UTC)
        else:
            dt = value.astimezone(UTC)
    else:
        dt = datetime.fromtimestamp(int(value), tz=UTC)
    return dt.replace(microsecond=0)


def to_duration(value: timedelta | int | float) -> timedelta:
    """Normalize a duration given as seconds or a timedelta.

    Raises:
        ValueError: If the duration is not strictly positive.
    """
    duration = value if isinstance(value, timedelta) else timedelta(seconds=value)
    if duration <= timedelta(0):
        raise ValueError(f"Duration must be positive, got {duration}")
    return duration


def epoch_seconds(instant: datetime) -> int:
    """Return an instant as integer seconds since the Unix epoch."""
    return int(to_instant(instant).timestamp())


@dataclass(frozen=True, slots=True)
class ExpiringLink:
    """A time-bounded access reference to a cached resource.

    Attributes:
        path: Logical path of the resource the link points to.
        url: Full URL, including the expiration and signature parameters.
        expires_at: Instant after which the link is no longer valid.

    Example:
        >>> link = issuer.issue("test/image", to_instant(1737733400))
        >>> link.expires
        1737733400
    """

    path: str
    url: str
    expires_at: datetime

    def __post_init__(self) -> None:
        """Validate link fields after initialization."""
        if not self.path:
            raise ValueError("ExpiringLink path cannot be empty")
        if not self.url:
            raise ValueError("ExpiringLink url cannot be empty")

    def __str__(self) -> str:
        return self.url

    @property
    def expires(self) -> int:
        """Expiration as integer seconds since the Unix epoch."""
        return epoch_seconds(self.expires_at)

    def is_expired(self, now: datetime) -> bool:
        """Check whether the link has expired at the supplied instant.

        Args:
            now: The current instant, usually from a Clock.

        Returns:
            True once now is at or past expires_at.
        """
        return to_instant(now) >= to_instant(self.expires_at)


@dataclass(frozen=True, slots=True)
class CacheStatistics:
    """Summary of a cache's contents.

    Attributes:
        entry_count: Number of cached resources.
        total_size: Combined size of cached content in bytes.
    """

    entry_count: int = 0
    total_size: int = 0
