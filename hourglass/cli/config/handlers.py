"""User-facing messages for config commands.

These are installed in the handler slots of the ConfigCommand built by
hourglass.cli.config.main.
"""

from __future__ import annotations

from typing import Any

import typer

from hourglass.cli.output import print_error, print_info, print_success
from hourglass.command.config.entry import ARGUMENT_NAME, ConfigCommandEntry


def show_current_value(ctx: typer.Context, entry: ConfigCommandEntry[Any]) -> None:
    """Print the value of a queried setting."""
    print_info(f"{entry.identifier} is currently set to {entry.format_value()}")


def show_new_value(ctx: typer.Context, entry: ConfigCommandEntry[Any]) -> None:
    """Print the value of a setting after it was changed."""
    print_success(f"{entry.identifier} has been set to {entry.format_value()}")


def report_modify_failure(ctx: typer.Context, entry: ConfigCommandEntry[Any]) -> None:
    """Tell the user a setting was not changed."""
    raw = ctx.params.get(ARGUMENT_NAME)
    if raw is None:
        print_error(f"Failed to set {entry.identifier}")
    else:
        print_error(f"Failed to set {entry.identifier} to {raw}")
    print_info(f"{entry.identifier} is currently set to {entry.format_value()}")
