"""Tests for timeline generation."""
from datetime import date, datetime, timedelta, timezone

import pytest

from monthly_widget.core.calendar import FixedCalendar, SystemCalendar
from monthly_widget.core.errors import DateArithmeticError
from monthly_widget.core.formatting import day_display, weekday_display
from monthly_widget.core.mock_data import preview_entries
from monthly_widget.core.timeline import (
    DayEntry,
    RefreshPolicy,
    build_timeline,
    generate_entries,
    placeholder_entry,
    snapshot_entry,
)

NOV_4_MORNING = datetime(2024, 11, 4, 10, 0, tzinfo=timezone.utc)


def consecutive(entries) -> bool:
    days = [entry.day for entry in entries]
    return all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


class TestGenerateEntries:
    """Test the day entry sequence."""

    def test_week_from_reference_day(self, fixed_calendar) -> None:
        entries = generate_entries(NOV_4_MORNING, 7, False, calendar=fixed_calendar)
        assert [entry.day for entry in entries] == [date(2024, 11, d) for d in range(4, 11)]
        assert all(entry.show_fun_font is False for entry in entries)

    def test_first_entry_is_start_of_day(self, fixed_calendar) -> None:
        entries = generate_entries(NOV_4_MORNING, calendar=fixed_calendar)
        assert len(entries) == 7
        assert entries[0].date == fixed_calendar.start_of_day(NOV_4_MORNING)
        for i, entry in enumerate(entries):
            assert entry.date == fixed_calendar.add_days(entries[0].date, i)

    def test_same_input_same_entries(self, fixed_calendar) -> None:
        first = generate_entries(NOV_4_MORNING, 7, True, calendar=fixed_calendar)
        second = generate_entries(NOV_4_MORNING, 7, True, calendar=fixed_calendar)
        assert first == second
        assert first is not second

    def test_year_boundary(self, fixed_calendar) -> None:
        entries = generate_entries(datetime(2024, 12, 29, 23, 59, tzinfo=timezone.utc),
                                   calendar=fixed_calendar)
        assert entries[0].day == date(2024, 12, 29)
        assert entries[-1].day == date(2025, 1, 4)
        assert len({entry.day for entry in entries}) == 7
        assert consecutive(entries)

    def test_daylight_saving_week(self) -> None:
        calendar = SystemCalendar("America/New_York")
        reference = datetime(2024, 11, 1, 12, 0, tzinfo=calendar.tz)
        entries = generate_entries(reference, calendar=calendar)

        assert [entry.day for entry in entries] == [date(2024, 11, d) for d in range(1, 8)]
        assert all(entry.date.hour == 0 and entry.date.minute == 0 for entry in entries)

    def test_midnight_skipped_by_daylight_saving(self) -> None:
        # Havana springs forward at midnight, so 2024-03-10 starts at 01:00
        calendar = SystemCalendar("America/Havana")
        reference = datetime(2024, 3, 10, 12, 0, tzinfo=calendar.tz)
        entries = generate_entries(reference, calendar=calendar)

        assert entries[0].date.hour == 1
        assert [entry.day for entry in entries] == [date(2024, 3, d) for d in range(10, 17)]
        for entry in entries[1:]:
            assert entry.date == calendar.start_of_day(entry.date)
            assert entry.date.hour == 0

    def test_toggle_fun_font_changes_only_flag(self, fixed_calendar) -> None:
        plain = generate_entries(NOV_4_MORNING, 7, False, calendar=fixed_calendar)
        fun = generate_entries(NOV_4_MORNING, 7, True, calendar=fixed_calendar)
        assert [entry.date for entry in plain] == [entry.date for entry in fun]
        assert all(entry.show_fun_font for entry in fun)

    def test_custom_count(self, fixed_calendar) -> None:
        assert len(generate_entries(NOV_4_MORNING, 3, calendar=fixed_calendar)) == 3

    @pytest.mark.parametrize("count", [0, -2])
    def test_non_positive_count(self, fixed_calendar, count: int) -> None:
        with pytest.raises(ValueError):
            generate_entries(NOV_4_MORNING, count, calendar=fixed_calendar)

    def test_unrepresentable_day_fails(self, fixed_calendar) -> None:
        with pytest.raises(DateArithmeticError):
            generate_entries(datetime(9999, 12, 28, tzinfo=timezone.utc), calendar=fixed_calendar)

    def test_entries_are_immutable(self, fixed_calendar) -> None:
        entry = generate_entries(NOV_4_MORNING, 1, calendar=fixed_calendar)[0]
        with pytest.raises(AttributeError):
            entry.show_fun_font = True


class TestTimeline:
    """Test the refresh-at-end timeline."""

    def test_refresh_at_last_entry(self, fixed_calendar) -> None:
        timeline = build_timeline(NOV_4_MORNING, calendar=fixed_calendar)
        assert timeline.policy is RefreshPolicy.AT_END
        assert timeline.refresh_at == timeline.entries[-1].date
        assert timeline.refresh_at == datetime(2024, 11, 10, tzinfo=timezone.utc)

    def test_is_expired(self, fixed_calendar) -> None:
        timeline = build_timeline(NOV_4_MORNING, calendar=fixed_calendar)
        assert not timeline.is_expired(NOV_4_MORNING)
        assert not timeline.is_expired(datetime(2024, 11, 9, 23, 59, tzinfo=timezone.utc))
        assert timeline.is_expired(datetime(2024, 11, 10, tzinfo=timezone.utc))

    def test_entry_for(self, fixed_calendar) -> None:
        timeline = build_timeline(NOV_4_MORNING, calendar=fixed_calendar)
        assert timeline.entry_for(NOV_4_MORNING) == timeline.entries[0]
        assert timeline.entry_for(datetime(2024, 11, 6, 15, 0, tzinfo=timezone.utc)) == timeline.entries[2]
        assert timeline.entry_for(datetime(2024, 11, 12, tzinfo=timezone.utc)) == timeline.entries[-1]
        assert timeline.entry_for(datetime(2024, 11, 3, tzinfo=timezone.utc)) is None


class TestSingleEntries:
    """Test placeholder, snapshot and preview entries."""

    def test_placeholder(self, fixed_calendar) -> None:
        entry = placeholder_entry(fixed_calendar)
        assert entry == DayEntry(date=NOV_4_MORNING, show_fun_font=False)

    def test_snapshot(self, fixed_calendar) -> None:
        assert snapshot_entry(fixed_calendar) == placeholder_entry(fixed_calendar)

    def test_preview_entries(self) -> None:
        calendar = FixedCalendar(NOV_4_MORNING, timezone="UTC")
        entries = preview_entries(calendar)
        assert [entry.day for entry in entries] == [date(2024, 11, d) for d in (4, 5, 6, 7)]
        assert not any(entry.show_fun_font for entry in entries)


class TestFormatting:
    """Test display strings."""

    def test_weekday_display(self) -> None:
        assert weekday_display(date(2024, 11, 4)) == "Monday"

    def test_day_display_is_unpadded(self) -> None:
        assert day_display(date(2024, 11, 4)) == "4"
        assert day_display(date(2024, 11, 30)) == "30"
