"""Timeline generation for the monthly widget.

A timeline is a week of day entries starting today. The host shows each
entry from its date onward and asks for a new timeline once the last one
is reached.
"""
from dataclasses import dataclass
from datetime import date as Date, datetime
from enum import Enum
from typing import List, Optional, Tuple

from monthly_widget.core.calendar import Calendar, SystemCalendar

DEFAULT_ENTRY_COUNT = 7


class RefreshPolicy(Enum):
    """When the host should ask for a new timeline."""
    AT_END = "at_end"


@dataclass(frozen=True)
class DayEntry:
    """One scheduled snapshot of the widget."""

    date: datetime
    show_fun_font: bool = False

    @property
    def day(self) -> Date:
        """Get the calendar date of this entry."""
        return self.date.date()


@dataclass(frozen=True)
class Timeline:
    """Ordered day entries plus the refresh policy for the host."""

    entries: Tuple[DayEntry, ...]
    policy: RefreshPolicy = RefreshPolicy.AT_END

    @property
    def refresh_at(self) -> datetime:
        """Instant after which the host must regenerate."""
        return self.entries[-1].date

    def entry_for(self, instant: datetime) -> Optional[DayEntry]:
        """Get the entry to display at an instant (None before the first)."""
        current = None
        for entry in self.entries:
            if entry.date > instant:
                break
            current = entry
        return current

    def is_expired(self, instant: datetime) -> bool:
        """Check whether the host should request a new timeline."""
        return instant >= self.refresh_at


def generate_entries(reference_instant: datetime, count: int = DEFAULT_ENTRY_COUNT,
                     show_fun_font: bool = False,
                     calendar: Optional[Calendar] = None) -> List[DayEntry]:
    """
    Build consecutive day entries starting at the reference day.

    Args:
        reference_instant: Instant whose day is the first entry
        count: Number of entries to produce
        show_fun_font: Fun-font toggle copied onto every entry
        calendar: Calendar used for day arithmetic (system local by default)

    Returns:
        List of DayEntry, one per day, in ascending order

    Raises:
        ValueError: count is not positive
        DateArithmeticError: a day cannot be represented by the calendar
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")

    if calendar is None:
        calendar = SystemCalendar()

    start = calendar.start_of_day(reference_instant)
    return [
        DayEntry(
            date=calendar.start_of_day(calendar.add_days(start, offset)),
            show_fun_font=bool(show_fun_font)
        )
        for offset in range(count)
    ]


def build_timeline(reference_instant: datetime, count: int = DEFAULT_ENTRY_COUNT,
                   show_fun_font: bool = False,
                   calendar: Optional[Calendar] = None) -> Timeline:
    """Generate entries and wrap them with the refresh-at-end policy."""
    entries = generate_entries(reference_instant, count, show_fun_font, calendar)
    return Timeline(entries=tuple(entries), policy=RefreshPolicy.AT_END)


def placeholder_entry(calendar: Optional[Calendar] = None) -> DayEntry:
    """Entry shown while the host has no timeline yet."""
    calendar = calendar or SystemCalendar()
    return DayEntry(date=calendar.now(), show_fun_font=False)


def snapshot_entry(calendar: Optional[Calendar] = None) -> DayEntry:
    """Entry for a one-off preview of the widget."""
    return placeholder_entry(calendar)
