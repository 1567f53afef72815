"""Base widget class for the monthly widget host."""
from abc import ABC, abstractmethod
from monthly_widget.display.renderer import Renderer


class Widget(ABC):
    """Base class for host-side widgets."""

    def __init__(self, config, calendar=None):
        """
        Initialize widget.

        Args:
            config: Config object with settings
            calendar: Calendar supplying the current instant
        """
        self.config = config
        self.calendar = calendar
        self.last_update = None

    @abstractmethod
    def render(self, renderer: Renderer, bounds: tuple) -> None:
        """
        Render the widget content.

        Args:
            renderer: Renderer object to draw with
            bounds: (x, y, width, height) tuple defining the widget area
        """
        pass

    @abstractmethod
    def update_data(self) -> bool:
        """
        Refresh widget state.

        Returns:
            True if data was updated, False otherwise
        """
        pass

    def get_name(self) -> str:
        """Get widget name."""
        return self.__class__.__name__.replace('Widget', '').lower()
