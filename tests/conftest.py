"""Shared fixtures for monthly widget tests."""
from datetime import datetime, timezone

import pytest
import yaml

from monthly_widget.core.calendar import FixedCalendar
from monthly_widget.utils.config import Config


@pytest.fixture
def fixed_calendar() -> FixedCalendar:
    """Calendar frozen at 2024-11-04 10:00 UTC."""
    return FixedCalendar(datetime(2024, 11, 4, 10, 0, tzinfo=timezone.utc), timezone='UTC')


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config under tmp_path/config and return its path."""
    config_dir = tmp_path / "config"
    config_dir.mkdir(exist_ok=True)
    config_path = config_dir / "config.yaml"

    def _write(data: dict):
        with open(config_path, 'w') as f:
            yaml.safe_dump(data, f)
        return config_path

    return _write


@pytest.fixture
def config(write_config) -> Config:
    """Config with the default widget settings."""
    path = write_config({
        'widget': {'fun_font': False, 'family': 'small'},
        'calendar': {'timezone': 'UTC'},
        'timeline': {'days': 7},
        'output': {'path': 'out/widget.png'},
    })
    return Config(path)
