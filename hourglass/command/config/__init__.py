"""Command tree for querying and modifying config values.

Usage:
    from hourglass.command.config import ConfigCommand

    ConfigCommand().register_value(value, click.FLOAT, float).build(parent)
"""

from __future__ import annotations

from hourglass.command.config.command import (
    SINGLE_SUCCESS,
    ConfigCommand,
    ConfigCommandHandler,
)
from hourglass.command.config.entry import (
    ARGUMENT_NAME,
    ConfigCommandEntry,
    format_config_value,
)

__all__ = [
    "ARGUMENT_NAME",
    "SINGLE_SUCCESS",
    "ConfigCommand",
    "ConfigCommandEntry",
    "ConfigCommandHandler",
    "format_config_value",
]
