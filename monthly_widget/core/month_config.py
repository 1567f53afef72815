"""Month-of-year display themes for the monthly widget."""
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Tuple

from PIL import ImageColor

from monthly_widget.core.calendar import Calendar
from monthly_widget.core.errors import ConfigurationError


class Color(NamedTuple):
    """An RGB color."""

    red: int
    green: int
    blue: int

    @classmethod
    def parse(cls, value: str) -> 'Color':
        """
        Parse a CSS-style color string.

        Accepts anything Pillow's ImageColor understands: '#RRGGBB',
        '#RGB', 'rgb(...)' and color names like 'white'.
        """
        try:
            rgb = ImageColor.getrgb(value)
        except (ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid color: {value!r}") from e
        return cls(*rgb[:3])

    @property
    def hex(self) -> str:
        return '#{:02x}{:02x}{:02x}'.format(*self)


WHITE = Color(255, 255, 255)


@dataclass(frozen=True)
class DisplayConfig:
    """Colors and emoji used to draw one month."""

    emoji: str
    background_color: Color
    weekday_text_color: Color
    day_text_color: Color

    def text_colors(self, shows_background: bool = True) -> Tuple[Color, Color]:
        """
        Get (weekday, day) text colors.

        Without its own background the widget sits on the host's accented
        container, so both lines are drawn in white.
        """
        if shows_background:
            return self.weekday_text_color, self.day_text_color
        return WHITE, WHITE


def _theme(emoji, background, weekday_text, day_text) -> DisplayConfig:
    return DisplayConfig(
        emoji=emoji,
        background_color=Color.parse(background),
        weekday_text_color=Color.parse(weekday_text),
        day_text_color=Color.parse(day_text),
    )


# Indexed by month number (1 = January)
MONTH_CONFIGS: Dict[int, DisplayConfig] = {
    1: _theme("⛄️", "#a7c7e7", "#1c3f60", "#ffffff"),
    2: _theme("❤️", "#f4b6c2", "#8b1e3f", "#ffffff"),
    3: _theme("☘️", "#a8d5a2", "#1f5f2e", "#2e7d32"),
    4: _theme("🌧️", "#b0c4de", "#2f4f6f", "#ffffff"),
    5: _theme("🌸", "#f8c8dc", "#7a2e52", "#ffffff"),
    6: _theme("🌤️", "#ffd97a", "#8a5a00", "#ffffff"),
    7: _theme("🏖️", "#4fc3f7", "#0d3c61", "#ffffff"),
    8: _theme("☀️", "#ffb74d", "#7a3e00", "#ffffff"),
    9: _theme("🍁", "#d7a86e", "#5c3a12", "#ffffff"),
    10: _theme("🎃", "#ff8c1a", "#1a1a1a", "#ffffff"),
    11: _theme("🦃", "#8d6e63", "#f5deb3", "#ffffff"),
    12: _theme("❄️", "#1e3a8a", "#bfdbfe", "#ffffff"),
}


def config_for_month(month: int) -> DisplayConfig:
    """Look up the theme for a month number (1-12)."""
    try:
        return MONTH_CONFIGS[month]
    except KeyError:
        raise ConfigurationError(f"No display config for month {month!r}", month=month) from None


def resolve(date, calendar: Optional[Calendar] = None) -> DisplayConfig:
    """
    Get the display config for the month a date falls in.

    Args:
        date: date or datetime to theme
        calendar: Calendar used to read the month; when omitted the month
            is read straight off the value

    Returns:
        The DisplayConfig for that month
    """
    month = calendar.month_of(date) if calendar is not None else date.month
    return config_for_month(month)
