"""Config subcommands.

Builds the 'config' command group from the settings of a HourglassConfig:
- list: Show all settings
- <key>: Query a setting
- <key> <value>: Modify a setting
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import click
import typer

from hourglass.cli.config import handlers
from hourglass.cli.config.list import create_list_command
from hourglass.command.config.command import ConfigCommand
from hourglass.core.config.models import HourglassConfig
from hourglass.core.config.value import ConfigListener


def argument_type_for(value_class: Any) -> click.ParamType:
    """Choose the click parameter type that parses values of value_class."""
    # bool before int: bool is a subclass of int
    if value_class is bool:
        return click.BOOL
    if value_class is int:
        return click.INT
    if value_class is float:
        return click.FLOAT
    if isinstance(value_class, type) and issubclass(value_class, Enum):
        return click.Choice([member.value for member in value_class], case_sensitive=False)
    return click.STRING


def create_config_command(
    config: HourglassConfig, on_change: Optional[ConfigListener] = None
) -> ConfigCommand:
    """Register every setting of config with the user-facing handlers.

    Args:
        config: Settings to expose
        on_change: Listener added to every setting (e.g. to save the file)
    """
    command = (
        ConfigCommand()
        .set_query_success_handler(handlers.show_current_value)
        .set_modify_success_handler(handlers.show_new_value)
        .set_modify_failure_handler(handlers.report_modify_failure)
    )

    for config_value in config.config_values():
        if on_change is not None:
            config_value.add_listener(on_change)
        value_class = config_value.value_class
        command.register_value(config_value, argument_type_for(value_class), value_class)

    return command


def create_config_app(
    config: HourglassConfig, on_change: Optional[ConfigListener] = None
) -> typer.Typer:
    """Create the 'config' command group for config.

    Examples:
        # Show all settings
        hourglass config list

        # Show one setting
        hourglass config time.day_speed

        # Change one setting
        hourglass config time.day_speed 2.5
    """
    app = typer.Typer(
        name="config",
        help="Query and modify Hourglass settings",
        add_completion=False,
        no_args_is_help=True,
    )
    app.command("list")(create_list_command(config))

    return create_config_command(config, on_change).build(app)
