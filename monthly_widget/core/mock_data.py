"""Fixed entries used to preview the widget without a live clock."""
from datetime import datetime
from typing import List, Optional

from monthly_widget.core.calendar import Calendar, SystemCalendar
from monthly_widget.core.timeline import DayEntry

PREVIEW_YEAR = 2024


def date_to_display(month: int, day: int, calendar: Optional[Calendar] = None) -> datetime:
    """Local midnight of a day in the preview year."""
    calendar = calendar or SystemCalendar()
    return calendar.start_of_day(datetime(PREVIEW_YEAR, month, day))


def preview_entries(calendar: Optional[Calendar] = None) -> List[DayEntry]:
    """Four November days, regular font."""
    return [
        DayEntry(date=date_to_display(11, day, calendar), show_fun_font=False)
        for day in (4, 5, 6, 7)
    ]
