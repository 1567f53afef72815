"""Text shown on the widget for a given day."""
from datetime import date

FUN_FONT_NAME = "Chalkduster"


def weekday_display(day: date) -> str:
    """Full weekday name, e.g. 'Monday'."""
    return day.strftime('%A')


def day_display(day: date) -> str:
    """Day of month without padding, e.g. '4'."""
    return str(day.day)
