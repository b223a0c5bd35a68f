"""List command - Show every setting with its current and default value."""

from __future__ import annotations

from typing import Callable, Optional

import typer
from rich.table import Table

from hourglass.cli.output import console, print_error
from hourglass.command.config.entry import format_config_value
from hourglass.core.config.models import HourglassConfig


def create_list_command(config: HourglassConfig) -> Callable[..., None]:
    """Create the 'config list' command for a config instance."""

    def command(
        section: Optional[str] = typer.Argument(
            None, help="Specific section to list (optional)"
        ),
    ) -> None:
        """List configuration settings.

        Examples:
            # List all settings
            hourglass config list

            # List sleep settings
            hourglass config list sleep
        """
        values = [
            value
            for value in config.config_values()
            if section is None or value.path[0] == section
        ]
        if not values:
            print_error(f"Section not found: {section}")
            raise typer.Exit(code=1)

        table = Table(title="Hourglass Configuration")
        table.add_column("Setting")
        table.add_column("Value")
        table.add_column("Default")

        for value in values:
            table.add_row(
                value.identifier,
                format_config_value(value.get()),
                format_config_value(value.default),
            )

        console.print(table)

    return command
