"""Error types raised by the monthly widget core."""


class WidgetError(Exception):
    """Base class for widget core failures."""


class ConfigurationError(WidgetError):
    """Raised when a month has no usable display configuration."""

    def __init__(self, message: str, month=None):
        super().__init__(message)
        self.month = month


class DateArithmeticError(WidgetError):
    """Raised when a day offset or start-of-day cannot be represented."""
