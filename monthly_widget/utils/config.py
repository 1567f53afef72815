"""Configuration management for the monthly widget."""
import yaml
from pathlib import Path

# config/config.yaml in a source checkout; absent when installed as a package
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_TIMELINE_DAYS = 7

# (width, height) for each supported widget family
FAMILY_SIZES = {
    'small': (170, 170),
    'medium': (364, 170),
}


class Config:
    """Handles loading and accessing configuration settings.

    With no explicit path the checkout's config/config.yaml is used if it
    exists; otherwise every getter returns its built-in default.
    """

    def __init__(self, config_path=None):
        if config_path is None and not DEFAULT_CONFIG_PATH.exists():
            print("No configuration file found, using built-in defaults")
            self.config_path = None
            self.config = {}
            return

        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    def reload(self):
        """Re-read the YAML file so toggle changes are picked up."""
        if self.config_path is not None:
            self.config = self._load_config()

    def get(self, key_path, default=None):
        """
        Get configuration value using dot notation.

        Example: config.get('widget.fun_font')
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_fun_font(self) -> bool:
        """Get the fun-font toggle."""
        return bool(self.get('widget.fun_font', False))

    def get_family(self) -> str:
        """Get the widget family, falling back to 'small'."""
        family = self.get('widget.family', 'small')
        if family not in FAMILY_SIZES:
            print(f"Warning: unknown widget family '{family}', using 'small'")
            return 'small'
        return family

    def get_display_size(self):
        """Get display dimensions as (width, height) tuple."""
        return FAMILY_SIZES[self.get_family()]

    def get_timezone(self):
        """Get the IANA timezone name, or None for the host's local zone."""
        return self.get('calendar.timezone', None)

    def get_timeline_days(self) -> int:
        """Get the number of entries per timeline, falling back to 7."""
        days = self.get('timeline.days', DEFAULT_TIMELINE_DAYS)
        try:
            days = int(days)
        except (TypeError, ValueError):
            days = 0
        if days < 1:
            print(f"Warning: invalid timeline.days '{self.get('timeline.days')}', "
                  f"using {DEFAULT_TIMELINE_DAYS}")
            return DEFAULT_TIMELINE_DAYS
        return days

    def get_check_interval(self) -> int:
        """Get host loop poll interval in seconds."""
        return int(self.get('refresh.check_interval_seconds', 60))

    def get_output_path(self) -> Path:
        """Get where rendered frames are written.

        Relative paths resolve against the project root, or the working
        directory when running on built-in defaults.
        """
        path = Path(self.get('output.path', '.cache/widget.png'))
        if not path.is_absolute():
            base = self.config_path.parent.parent if self.config_path else Path.cwd()
            path = base / path
        return path
