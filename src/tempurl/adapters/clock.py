"""Clock adapter implementing ClockPort, with a freezable test mode."""

from __future__ import annotations

import contextlib
import threading
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from tempurl.core.exceptions import ClockNotFrozenError
from tempurl.core.models import to_instant


if TYPE_CHECKING:
    from collections.abc import Iterator


class Clock:
    """Source of the current instant that can be frozen and advanced.

    Unfrozen, now() reads the wall clock. Frozen, every now() call returns
    the same pinned instant until the clock is advanced or unfrozen.

    Each component that needs time receives a Clock instance. Tests should
    use frozen() so the pinned instant never outlives the test.

    Example:
        >>> clock = Clock()
        >>> with clock.frozen(1737729800):
        ...     clock.now().timestamp()
        1737729800.0
    """

    def __init__(self) -> None:
        self._frozen_at: datetime | None = None
        self._lock = threading.Lock()

    @property
    def is_frozen(self) -> bool:
        """Whether now() currently returns a pinned instant."""
        with self._lock:
            return self._frozen_at is not None

    def now(self) -> datetime:
        """Return the current instant as a UTC whole-second datetime."""
        with self._lock:
            if self._frozen_at is not None:
                return self._frozen_at
        return to_instant(datetime.now(UTC))

    def freeze(self, instant: datetime | int | None = None) -> datetime:
        """Pin now() to an instant.

        Args:
            instant: Instant to pin, as a datetime or epoch seconds.
                Defaults to the current wall-clock instant.

        Returns:
            The pinned instant.
        """
        pinned = to_instant(datetime.now(UTC) if instant is None else instant)
        with self._lock:
            self._frozen_at = pinned
        return pinned

    def advance(self, duration: timedelta | int) -> datetime:
        """Move a frozen clock forward.

        Args:
            duration: Amount to advance, as a timedelta or seconds.

        Returns:
            The new pinned instant.

        Raises:
            ClockNotFrozenError: If the clock is reading wall-clock time.
        """
        if not isinstance(duration, timedelta):
            duration = timedelta(seconds=duration)
        with self._lock:
            if self._frozen_at is None:
                raise ClockNotFrozenError("Cannot advance a clock that is not frozen")
            self._frozen_at = to_instant(self._frozen_at + duration)
            return self._frozen_at

    def unfreeze(self) -> None:
        """Return to reading wall-clock time."""
        with self._lock:
            self._frozen_at = None

    @contextlib.contextmanager
    def frozen(self, instant: datetime | int | None = None) -> Iterator[datetime]:
        """Freeze the clock for the duration of a with block.

        The clock is unfrozen on exit, even if the block raises.
        """
        pinned = self.freeze(instant)
        try:
            yield pinned
        finally:
            self.unfreeze()
