"""Hourglass CLI - Main application entry point.

The command tree depends on the loaded configuration (one command per
setting), so the application is created by create_app() once the config file
has been read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

from hourglass.cli.config import create_config_app
from hourglass.cli.output import print_error, print_info
from hourglass.core.config import (
    ConfigValue,
    HourglassConfig,
    load_config,
    resolve_config_path,
    save_config,
)
from hourglass.core.exceptions import HourglassError
from hourglass.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    config: Optional[HourglassConfig] = None,
    config_path: Optional[Path] = None,
    save: bool = True,
) -> typer.Typer:
    """Create the Hourglass application.

    Args:
        config: Settings to expose (loaded from config_path if omitted)
        config_path: Config file (see resolve_config_path())
        save: Write the config file after every change

    Raises:
        HourglassError: If the config file cannot be loaded
    """
    path = resolve_config_path(config_path)
    if config is None:
        config = load_config(path)

    def save_on_change(config_value: ConfigValue[Any], new_value: Any) -> None:
        logger.debug("Config value changed", identifier=config_value.identifier, value=new_value)
        if save:
            save_config(config, path)

    app = typer.Typer(
        name="hourglass",
        help="Time control settings for game servers",
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        log_level: str = typer.Option(
            "WARNING", "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)"
        ),
        version: bool = typer.Option(
            False, "--version", "-v", help="Show version and exit"
        ),
    ) -> None:
        """Hourglass - Time control settings for game servers."""
        configure_logging(level=log_level)

        if version:
            from hourglass import __version__

            typer.echo(f"Hourglass {__version__}")
            raise typer.Exit()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    app.add_typer(create_config_app(config, save_on_change), name="config")
    return app


def cli_main() -> None:
    """Entry point for console_scripts.

    This function is called when running 'hourglass' command.
    """
    try:
        app = create_app()
    except HourglassError as e:
        print_error(e.user_message)
        for fix in e.how_to_fix:
            print_info(fix)
        raise SystemExit(1)
    app()


if __name__ == "__main__":
    cli_main()
