"""Monthly widget showing the weekday and day with a per-month theme."""
from .base import Widget
from monthly_widget.core.calendar import SystemCalendar
from monthly_widget.core.errors import WidgetError
from monthly_widget.core.formatting import FUN_FONT_NAME, day_display, weekday_display
from monthly_widget.core.month_config import resolve
from monthly_widget.core.timeline import build_timeline, placeholder_entry
from monthly_widget.display.renderer import Renderer

KIND = "MonthlyWidget"
DISPLAY_NAME = "Monthly Style Widget"
DESCRIPTION = "The theme of the widget changes based on month."
SUPPORTED_FAMILIES = ('small', 'medium')


class MonthlyWidget(Widget):
    """Displays today's weekday and day of month."""

    def __init__(self, config, calendar=None):
        if calendar is None:
            calendar = SystemCalendar(config.get_timezone())
        super().__init__(config, calendar)
        self.timeline = None
        self.show_fun_font = config.get_fun_font()
        self.shows_background = config.get('widget.shows_background', True)

    def needs_regeneration(self, now) -> bool:
        """Check if the timeline is missing, expired or out of date with the toggle."""
        if self.timeline is None:
            return True
        if self.timeline.is_expired(now):
            return True
        return self.show_fun_font != self.config.get_fun_font()

    def update_data(self) -> bool:
        """Regenerate the timeline when needed.

        A failed regeneration keeps the last good timeline.
        """
        now = self.calendar.now()
        if not self.needs_regeneration(now):
            return False

        show_fun_font = self.config.get_fun_font()
        try:
            timeline = build_timeline(
                now,
                count=self.config.get_timeline_days(),
                show_fun_font=show_fun_font,
                calendar=self.calendar
            )
        except WidgetError as e:
            print(f"Error generating timeline: {e}")
            if self.timeline is None:
                raise
            print("Keeping previous timeline")
            return False

        self.timeline = timeline
        self.show_fun_font = show_fun_font
        self.last_update = now
        print(f"Timeline generated: {len(timeline.entries)} entries, "
              f"refresh at {timeline.refresh_at.isoformat()}")
        return True

    def current_entry(self):
        """Get the entry to draw right now."""
        if self.timeline is not None:
            entry = self.timeline.entry_for(self.calendar.now())
            if entry is not None:
                return entry
        return placeholder_entry(self.calendar)

    def render(self, renderer: Renderer, bounds: tuple) -> None:
        """Render the monthly widget."""
        x, y, width, height = bounds

        entry = self.current_entry()
        day = self.calendar.localize(entry.date).date()
        theme = resolve(day)
        weekday_color, day_color = theme.text_colors(self.shows_background)
        font_name = FUN_FONT_NAME if entry.show_fun_font else None

        if self.shows_background:
            renderer.draw_rectangle(x, y, width, height, fill=theme.background_color)

        # Emoji and weekday along the top
        top_y = y + height // 6
        renderer.draw_text(theme.emoji, x + 10, top_y, font_size=20, anchor="lm")
        renderer.draw_text(
            weekday_display(day),
            x + 38,
            top_y,
            font_size=18,
            bold=True,
            anchor="lm",
            color=weekday_color,
            font_name=font_name
        )

        # Day number fills the rest
        renderer.draw_text(
            day_display(day),
            x + width // 2,
            y + 3 * height // 5,
            font_size=80,
            bold=True,
            anchor="mm",
            color=day_color,
            font_name=font_name
        )
