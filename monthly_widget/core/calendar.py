"""Calendar capability used by the resolver and the timeline generator.

All day arithmetic goes through a Calendar so the core stays pure and can
be tested against a frozen clock.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from monthly_widget.core.errors import DateArithmeticError


class Calendar(ABC):
    """Clock plus day arithmetic in a single timezone."""

    def __init__(self, tz: Optional[tzinfo] = None):
        # None means the host's local zone
        self.tz = tz

    @abstractmethod
    def now(self) -> datetime:
        """Get the current instant as an aware datetime."""
        pass

    def localize(self, instant: datetime) -> datetime:
        """Express an instant in this calendar's timezone.

        Naive datetimes are taken to be wall time in this calendar.
        """
        if instant.tzinfo is None:
            if self.tz is None:
                return instant.astimezone()
            return instant.replace(tzinfo=self.tz)
        return instant.astimezone(self.tz)

    def start_of_day(self, instant: datetime) -> datetime:
        """Get local midnight of the day containing the instant."""
        local = self.localize(instant)
        try:
            return self._at_midnight(local.year, local.month, local.day)
        except (OverflowError, ValueError) as e:
            raise DateArithmeticError(f"Cannot compute start of day for {instant!r}: {e}") from e

    def add_days(self, instant: datetime, days: int) -> datetime:
        """
        Move an instant by whole calendar days.

        Wall-clock time is kept across DST changes, so adding one day to a
        local midnight always lands on the next local midnight.

        Args:
            instant: Starting point
            days: Number of days to add (may be negative)

        Returns:
            Aware datetime in this calendar's timezone
        """
        local = self.localize(instant)
        try:
            day = local.date() + timedelta(days=days)
            moved = datetime.combine(day, local.time())
            return self._attach(moved)
        except (OverflowError, ValueError) as e:
            raise DateArithmeticError(f"Cannot add {days} days to {instant!r}: {e}") from e

    def month_of(self, instant) -> int:
        """Get the month number of a datetime or date."""
        if isinstance(instant, datetime):
            instant = self.localize(instant)
        return instant.month

    def _at_midnight(self, year: int, month: int, day: int) -> datetime:
        return self._attach(datetime(year, month, day))

    def _attach(self, wall: datetime) -> datetime:
        """Attach this calendar's zone to a naive wall-clock time."""
        if self.tz is None:
            return wall.astimezone()
        # Round-trip through UTC so times inside a DST gap get a real offset
        return wall.replace(tzinfo=self.tz).astimezone(ZoneInfo('UTC')).astimezone(self.tz)


class SystemCalendar(Calendar):
    """Calendar backed by the wall clock."""

    def __init__(self, timezone: Optional[str] = None):
        super().__init__(ZoneInfo(timezone) if timezone else None)
        self.timezone_name = timezone

    def now(self) -> datetime:
        return datetime.now(self.tz).astimezone(self.tz)


class FixedCalendar(Calendar):
    """Calendar whose clock is frozen at a given instant."""

    def __init__(self, frozen: datetime, timezone: Optional[str] = 'UTC'):
        super().__init__(ZoneInfo(timezone) if timezone else None)
        self.frozen = self.localize(frozen)

    def now(self) -> datetime:
        return self.frozen

    def advance(self, **delta) -> None:
        """Move the frozen clock forward, e.g. advance(days=1)."""
        self.frozen = self.frozen + timedelta(**delta)
