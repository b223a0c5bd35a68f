"""
Hourglass server configuration models.

The settings are pydantic models that validate on assignment, so a value
changed at run time is range-checked the same way as a value read from
hourglass.yaml.

Configuration Hierarchy
-----------------------
    HourglassConfig
    ├── TimeConfig        # Day and night speed
    ├── SleepConfig       # Sleep feature and sleep speed curve
    └── MessageConfig     # Who receives server messages, and their text

Speeds are multipliers of the vanilla time speed: 1.0 is normal, 2.0 is twice
as fast, 0.0 stops time.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field

from hourglass.core.config.value import ConfigValue

# Upper bound for all speed multipliers
MAX_SPEED = 24.0


class MessageTarget(str, Enum):
    """Players that receive a server message."""

    ALL = "all"
    DIMENSION = "dimension"
    SLEEPING = "sleeping"


class _Section(BaseModel):
    """Base for config sections: validated on assignment, unknown keys rejected."""

    model_config = {"validate_assignment": True, "extra": "forbid"}


class TimeConfig(_Section):
    """Time speed while no one is sleeping."""

    day_speed: float = Field(
        default=1.0, ge=0.0, le=MAX_SPEED, description="Speed of time during the day"
    )
    night_speed: float = Field(
        default=1.0, ge=0.0, le=MAX_SPEED, description="Speed of time during the night"
    )


class SleepConfig(_Section):
    """Sleep feature settings."""

    enable_sleep_feature: bool = Field(
        default=True, description="Speed up time while players are sleeping"
    )
    sleep_speed_max: float = Field(
        default=120.0,
        ge=0.0,
        le=24000.0,
        description="Highest speed of time along the sleep curve",
    )
    sleep_speed_min: float = Field(
        default=1.0,
        ge=0.0,
        le=24000.0,
        description="Speed of time when one player is sleeping",
    )
    sleep_speed_all: float = Field(
        default=-1.0,
        ge=-1.0,
        le=24000.0,
        description="Speed of time when all players are sleeping (-1 to disable)",
    )
    sleep_speed_curve: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Shape of the curve between minimum and maximum sleep speed",
    )
    clear_weather_on_wake: bool = Field(
        default=True, description="Clear rain and thunder when players wake up"
    )
    allow_day_sleep: bool = Field(
        default=False, description="Allow players to sleep during the day"
    )


class MessageConfig(_Section):
    """Server message settings."""

    target: MessageTarget = Field(
        default=MessageTarget.DIMENSION, description="Players that receive messages"
    )
    morning_message: str = Field(
        default="Good morning!", description="Message sent when the night is skipped"
    )
    bed_message: str = Field(
        default="{player} is now sleeping.",
        description="Message sent when a player goes to bed",
    )


class HourglassConfig(BaseModel):
    """Aggregated Hourglass server configuration."""

    model_config = {"validate_assignment": True, "extra": "forbid"}

    time: TimeConfig = Field(default_factory=TimeConfig)
    sleep: SleepConfig = Field(default_factory=SleepConfig)
    messages: MessageConfig = Field(default_factory=MessageConfig)

    def config_values(self) -> Iterator[ConfigValue]:
        """Yield a ConfigValue for every leaf setting, in declaration order."""
        for section_name in type(self).model_fields:
            section = getattr(self, section_name)
            for field_name in type(section).model_fields:
                yield ConfigValue(self, (section_name, field_name))

    def value(self, identifier: str) -> ConfigValue:
        """Return the ConfigValue for a dotted identifier.

        Raises:
            KeyError: If no such setting exists
        """
        parts = identifier.split(".")
        if len(parts) != 2:
            raise KeyError(f"Unknown config field: {identifier}")
        try:
            return ConfigValue(self, parts)
        except (AttributeError, KeyError):
            raise KeyError(f"Unknown config field: {identifier}") from None
