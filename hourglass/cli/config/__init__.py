"""Config command group - Query and modify Hourglass settings."""

from __future__ import annotations

from hourglass.cli.config.main import create_config_app

__all__ = ["create_config_app"]
