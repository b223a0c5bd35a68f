"""Config command entry - one config value exposed as a command.

An entry pairs a ConfigValue with the click parameter type used to read a new
value out of the command line. ConfigCommand builds one command per entry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

import click
import typer

from hourglass.core.config.value import ConfigValue

T = TypeVar("T")

# Name of the positional parameter holding the new value
ARGUMENT_NAME = "value"


class ConfigCommandEntry(Generic[T]):
    """A config value registered in a ConfigCommand.

    The entry holds a reference to the ConfigValue but does not own it.

    Example:
        entry = ConfigCommandEntry(config.value("time.day_speed"), click.FLOAT, float)
        entry.identifier  # "time.day_speed"
    """

    def __init__(
        self,
        config_value: ConfigValue[T],
        argument_type: click.ParamType,
        value_class: type,
        identifier: Optional[str] = None,
    ) -> None:
        """Initialize entry.

        Args:
            config_value: Config cell read by query and written by modify
            argument_type: Parser for the modify command's value
            value_class: Type of the underlying value
            identifier: Command name (defaults to the config value's dotted path)
        """
        self.config_value = config_value
        self.argument_type = argument_type
        self.value_class = value_class
        self.identifier = identifier or config_value.identifier

    def get_config_value(self) -> ConfigValue[T]:
        """Return the config cell behind this entry."""
        return self.config_value

    def create_argument(self) -> Any:
        """Create the declaration of the modify command's value parameter.

        The parameter is optional: a command invoked without it is a query.
        The text is kept raw here and parsed by get_argument().
        """
        return typer.Argument(
            None,
            metavar=self.metavar,
            help=f"New value ({self.value_class.__name__})",
            show_default=False,
        )

    def get_argument(self, context: typer.Context) -> T:
        """Parse the new value from the command context.

        Errors from the click parser are re-raised as typer.BadParameter so
        the command framework running the command reports them as usage
        errors.

        Args:
            context: Context of the executing command

        Returns:
            The parsed value

        Raises:
            typer.BadParameter: If the value is missing or malformed
        """
        param = self._find_param(context)
        raw = context.params.get(ARGUMENT_NAME)
        if raw is None:
            raise typer.BadParameter("Missing value.", ctx=context, param=param)
        try:
            return self.argument_type.convert(raw, param, context)
        except click.BadParameter as e:
            raise typer.BadParameter(e.message, ctx=context, param=param) from e

    @property
    def metavar(self) -> str:
        """Placeholder shown for the value in help output."""
        if isinstance(self.argument_type, click.Choice):
            return "[" + "|".join(str(c) for c in self.argument_type.choices) + "]"
        return self.argument_type.name.upper()

    def format_value(self) -> str:
        """Render the current value for user messages."""
        return format_config_value(self.config_value.get())

    def describe(self) -> str:
        """Help text for the entry's command."""
        description = self.config_value.description
        return description or f"Query or modify {self.identifier}"

    @staticmethod
    def _find_param(context: typer.Context) -> Optional[Any]:
        for param in context.command.params:
            if param.name == ARGUMENT_NAME:
                return param
        return None

    def __repr__(self) -> str:
        return f"ConfigCommandEntry({self.identifier!r})"


def format_config_value(value: Any) -> str:
    """Render a config value the way it is typed on the command line."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
