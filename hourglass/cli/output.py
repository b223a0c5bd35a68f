"""Status message output for CLI commands.

All command output goes through one shared rich console so messages look the
same across commands.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# Shared console instance
console = Console(force_terminal=False, no_color=False)


def print_success(message: str) -> None:
    """Print success message.

    Example:
        print_success("time.day_speed has been set to 2.0")
    """
    console.print(f"[green][OK][/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print error message.

    Example:
        print_error("Failed to set time.day_speed")
    """
    console.print(f"[red][ERROR][/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow][WARN][/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue][INFO][/blue] {escape(message)}")
