"""Config command builder.

Creates a command tree for querying and modifying config values. Every
registered entry becomes a command named after its identifier under a parent
typer group:

    hourglass config time.day_speed          # query
    hourglass config time.day_speed 2.5      # modify

What the user sees is up to the handlers: query success, modify success and
modify failure each have one optional handler slot. Handlers receive the
context of the executing command and the entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

import click
import typer

from hourglass.command.config.entry import ConfigCommandEntry
from hourglass.core.config.value import ConfigValue
from hourglass.core.exceptions import (
    ArgumentParseError,
    ConfigCommandError,
    ConfigSetError,
)
from hourglass.core.logging import get_logger

logger = get_logger(__name__)

# Result of a command that did what was asked
SINGLE_SUCCESS = 1

ConfigCommandHandler = Callable[[typer.Context, ConfigCommandEntry[Any]], None]


class ConfigCommand:
    """Builder for a tree of config query/modify commands.

    Register entries and set handlers first, then call build() once.

    Example:
        command = (
            ConfigCommand()
            .register_value(config.value("time.day_speed"), click.FLOAT, float)
            .set_query_success_handler(show_value)
            .set_modify_success_handler(show_new_value)
        )
        command.build(config_app)
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ConfigCommandEntry[Any]] = {}
        self.query_success_handler: Optional[ConfigCommandHandler] = None
        self.modify_success_handler: Optional[ConfigCommandHandler] = None
        self.modify_failure_handler: Optional[ConfigCommandHandler] = None

    @property
    def entries(self) -> Mapping[str, ConfigCommandEntry[Any]]:
        """Registered entries by identifier (read-only view)."""
        return MappingProxyType(self._entries)

    def register_value(
        self,
        config_value: ConfigValue[Any],
        argument_type: click.ParamType,
        value_class: type,
    ) -> "ConfigCommand":
        """Register a config value parsed with argument_type when modified.

        Returns:
            self, for chaining
        """
        return self.register(ConfigCommandEntry(config_value, argument_type, value_class))

    def register(self, entry: ConfigCommandEntry[Any]) -> "ConfigCommand":
        """Register an entry, replacing any entry with the same identifier.

        Returns:
            self, for chaining
        """
        self._entries[entry.identifier] = entry
        return self

    def set_query_success_handler(
        self, handler: Optional[ConfigCommandHandler]
    ) -> "ConfigCommand":
        """Set the handler called after a query; it should show the current value."""
        self.query_success_handler = handler
        return self

    def set_modify_success_handler(
        self, handler: Optional[ConfigCommandHandler]
    ) -> "ConfigCommand":
        """Set the handler called after a modify; it should show the new value."""
        self.modify_success_handler = handler
        return self

    def set_modify_failure_handler(
        self, handler: Optional[ConfigCommandHandler]
    ) -> "ConfigCommand":
        """Set the handler called when a modify fails; it should report the failure.

        Without this handler modify errors propagate to the command framework.
        """
        self.modify_failure_handler = handler
        return self

    def build(self, parent: typer.Typer) -> typer.Typer:
        """Attach one command per registered entry to parent.

        Handlers should be set before this is called. Calling build() twice
        registers every command twice.

        Args:
            parent: Typer group to build the config commands on

        Returns:
            parent, for additional chaining
        """
        for entry in self._entries.values():
            parent.command(
                name=entry.identifier,
                help=entry.describe(),
                # Negative numbers are values, not options
                context_settings={"ignore_unknown_options": True},
            )(self._create_callback(entry))

        return parent

    def _create_callback(self, entry: ConfigCommandEntry[Any]) -> Callable[..., None]:
        """Create the command function routing to query or modify."""

        def callback(
            ctx: typer.Context,
            value: Optional[str] = entry.create_argument(),
        ) -> None:
            if value is None:
                result = self.query_config_command(ctx, entry)
            else:
                result = self.modify_config_command(ctx, entry)

            if result != SINGLE_SUCCESS:
                raise typer.Exit(code=1)

        return callback

    def query_config_command(
        self, context: typer.Context, entry: ConfigCommandEntry[Any]
    ) -> int:
        """Handle a query command.

        Returns:
            SINGLE_SUCCESS if a query handler was called, 0 otherwise
        """
        if self.query_success_handler is None:
            return 0

        self.query_success_handler(context, entry)
        return SINGLE_SUCCESS

    def modify_config_command(
        self, context: typer.Context, entry: ConfigCommandEntry[Any]
    ) -> int:
        """Handle a modify command.

        Parses the new value from the context and sets the entry's config
        value. Parse and set failures are handled the same way: with a failure
        handler they are logged and reported, without one the original error
        is raised.

        Returns:
            SINGLE_SUCCESS if the value was set, 0 otherwise
        """
        try:
            argument = self._fetch_argument(context, entry)
            self._apply_argument(entry, argument)
        except ConfigCommandError as error:
            return self._handle_modify_failure(context, entry, error)

        if self.modify_success_handler is not None:
            self.modify_success_handler(context, entry)
        return SINGLE_SUCCESS

    def _fetch_argument(
        self, context: typer.Context, entry: ConfigCommandEntry[Any]
    ) -> Any:
        try:
            return entry.get_argument(context)
        except typer.BadParameter as e:
            raise ArgumentParseError(
                "Command failed to fetch config argument", entry.identifier, e
            ) from e

    def _apply_argument(self, entry: ConfigCommandEntry[Any], argument: Any) -> None:
        try:
            entry.get_config_value().set(argument)
        except Exception as e:
            raise ConfigSetError(
                f"Command failed to set config to value: {argument}",
                entry.identifier,
                e,
                argument,
            ) from e

    def _handle_modify_failure(
        self,
        context: typer.Context,
        entry: ConfigCommandEntry[Any],
        error: ConfigCommandError,
    ) -> int:
        if self.modify_failure_handler is None:
            raise error.cause from None

        logger.error(str(error), identifier=entry.identifier, cause=repr(error.cause))
        self.modify_failure_handler(context, entry)
        return 0
