"""
Shared pytest fixtures and configuration for Hourglass tests.

Fixture Organization
--------------------
- **config**: Fresh HourglassConfig with default values
- **config_path**: Config file path inside a temporary directory
- **make_context**: Builds a click context holding a command value
- **reset_logging**: Restores the default logging config after each test
"""

from pathlib import Path
from typing import Callable, Generator, Optional

import pytest
import typer
from typer.main import get_command

from hourglass.command.config.entry import ARGUMENT_NAME
from hourglass.core.config import HourglassConfig
from hourglass.core.logging import configure_logging


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def config() -> HourglassConfig:
    """Create a configuration with default values."""
    return HourglassConfig()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path of a config file that does not exist yet."""
    return tmp_path / "hourglass.yaml"


# ============================================================================
# Command Fixtures
# ============================================================================


@pytest.fixture
def make_context() -> Callable[[Optional[str]], typer.Context]:
    """Factory for contexts of a typer config command.

    Example:
        def test_parse(make_context):
            ctx = make_context("2.5")
            assert ctx.params["value"] == "2.5"
    """
    app = typer.Typer()

    @app.callback()
    def main() -> None:
        pass

    @app.command(name="time.day_speed")
    def day_speed(value: Optional[str] = typer.Argument(None)) -> None:
        pass

    command = get_command(app).commands["time.day_speed"]

    def _make(value: Optional[str] = None) -> typer.Context:
        ctx = typer.Context(command)
        ctx.params = {ARGUMENT_NAME: value}
        return ctx

    return _make


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo log level changes made by CLI invocations."""
    yield
    configure_logging(level="INFO")
