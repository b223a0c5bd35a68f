"""
Configuration for Hourglass.

Usage Example
-------------
    from hourglass.core.config import load_config

    config = load_config()
    day_speed = config.value("time.day_speed")
    day_speed.set(2.0)
"""

from hourglass.core.config.value import ConfigValue
from hourglass.core.config.models import (
    HourglassConfig,
    MessageConfig,
    MessageTarget,
    SleepConfig,
    TimeConfig,
)
from hourglass.core.config.loader import (
    expand_env_vars,
    load_config,
    resolve_config_path,
    save_config,
)

__all__ = [
    "ConfigValue",
    "HourglassConfig",
    "MessageConfig",
    "MessageTarget",
    "SleepConfig",
    "TimeConfig",
    "expand_env_vars",
    "load_config",
    "resolve_config_path",
    "save_config",
]
