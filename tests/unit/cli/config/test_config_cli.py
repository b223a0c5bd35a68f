"""Tests for the 'hourglass config' command group.

Organization
------------
- TestArgumentTypeFor: parser selection by value type
- TestCreateConfigCommand: registration of every setting
- TestQuery: 'config <key>'
- TestModify: 'config <key> <value>'
- TestList: 'config list'
"""

from __future__ import annotations

from unittest.mock import Mock

import click
from typer.testing import CliRunner

from hourglass.cli.config.main import (
    argument_type_for,
    create_config_app,
    create_config_command,
)
from hourglass.core.config import MessageTarget

runner = CliRunner()


class TestArgumentTypeFor:
    """Tests for argument_type_for()."""

    def test_scalar_types(self):
        assert argument_type_for(bool) is click.BOOL
        assert argument_type_for(int) is click.INT
        assert argument_type_for(float) is click.FLOAT
        assert argument_type_for(str) is click.STRING

    def test_enum_becomes_choice(self):
        param_type = argument_type_for(MessageTarget)

        assert isinstance(param_type, click.Choice)
        assert list(param_type.choices) == ["all", "dimension", "sleeping"]


class TestCreateConfigCommand:
    """Tests for create_config_command()."""

    def test_registers_every_setting(self, config):
        command = create_config_command(config)

        assert len(command.entries) == 12
        assert command.entries["sleep.sleep_speed_curve"].argument_type is click.FLOAT

    def test_installs_all_handlers(self, config):
        command = create_config_command(config)

        assert command.query_success_handler is not None
        assert command.modify_success_handler is not None
        assert command.modify_failure_handler is not None

    def test_on_change_listener(self, config):
        listener = Mock()
        command = create_config_command(config, on_change=listener)

        command.entries["time.day_speed"].get_config_value().set(2.0)

        listener.assert_called_once()
        assert listener.call_args.args[1] == 2.0


class TestQuery:
    """Tests for querying a setting."""

    def test_shows_current_value(self, config):
        config.time.day_speed = 3.0
        app = create_config_app(config)

        result = runner.invoke(app, ["time.day_speed"])

        assert result.exit_code == 0
        assert "time.day_speed is currently set to 3.0" in result.output

    def test_shows_enum_value(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["messages.target"])

        assert result.exit_code == 0
        assert "dimension" in result.output

    def test_unknown_key(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["time.dusk_speed"])

        assert result.exit_code == 2


class TestModify:
    """Tests for modifying a setting."""

    def test_sets_float(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["time.day_speed", "2.5"])

        assert result.exit_code == 0
        assert config.time.day_speed == 2.5
        assert "time.day_speed has been set to 2.5" in result.output

    def test_sets_bool(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["sleep.allow_day_sleep", "yes"])

        assert result.exit_code == 0
        assert config.sleep.allow_day_sleep is True

    def test_sets_enum_case_insensitive(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["messages.target", "ALL"])

        assert result.exit_code == 0
        assert config.messages.target is MessageTarget.ALL

    def test_sets_string(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["messages.morning_message", "Rise and shine"])

        assert result.exit_code == 0
        assert config.messages.morning_message == "Rise and shine"

    def test_sets_negative_value(self, config):
        config.sleep.sleep_speed_all = 100.0
        app = create_config_app(config)

        result = runner.invoke(app, ["sleep.sleep_speed_all", "-1"])

        assert result.exit_code == 0
        assert config.sleep.sleep_speed_all == -1.0
        assert "sleep.sleep_speed_all has been set to -1.0" in result.output

    def test_rejected_negative_reports_failure(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["sleep.sleep_speed_all", "-2"])

        assert result.exit_code == 1
        assert config.sleep.sleep_speed_all == -1.0
        assert "Failed to set sleep.sleep_speed_all to -2" in result.output

    def test_malformed_value_reports_failure(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["time.day_speed", "fast"])

        assert result.exit_code == 1
        assert "Failed to set time.day_speed to fast" in result.output
        assert config.time.day_speed == 1.0

    def test_out_of_range_value_reports_failure(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["time.day_speed", "30"])

        assert result.exit_code == 1
        assert "Failed to set time.day_speed to 30" in result.output
        assert config.time.day_speed == 1.0

    def test_on_change_not_called_on_failure(self, config):
        listener = Mock()
        app = create_config_app(config, on_change=listener)

        runner.invoke(app, ["time.day_speed", "30"])

        listener.assert_not_called()


class TestList:
    """Tests for 'config list'."""

    def test_lists_section(self, config):
        config.time.night_speed = 5.0
        app = create_config_app(config)

        result = runner.invoke(app, ["list", "time"])

        assert result.exit_code == 0
        assert "time.day_speed" in result.output
        assert "5.0" in result.output
        assert "sleep.allow_day_sleep" not in result.output

    def test_unknown_section(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["list", "weather"])

        assert result.exit_code == 1
        assert "Section not found: weather" in result.output

    def test_help_lists_settings(self, config):
        app = create_config_app(config)

        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "list" in result.output
