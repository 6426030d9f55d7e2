"""
Runtime configuration.

Values come from environment variables and can be overridden by the CLI:

    SCICALC_STATE_FILE  where memory and theme are persisted
    SCICALC_LOG_LEVEL   logging level name (default INFO)
    SCICALC_LOG_FILE    optional log file for the terminal UI
"""

import os
from pathlib import Path

from pydantic import BaseModel

DEFAULT_STATE_FILE = Path.home() / ".scicalc" / "calculator_state.json"


class CalculatorConfig(BaseModel):
    """Configuration shared by the TUI, the CLI and the MCP server."""
    state_file: Path = DEFAULT_STATE_FILE
    log_level: str = "INFO"
    log_file: Path | None = None

    @classmethod
    def from_env(cls, **overrides) -> "CalculatorConfig":
        """Build a config from the environment; non-None overrides win."""
        values: dict = {}
        if state_file := os.environ.get("SCICALC_STATE_FILE"):
            values["state_file"] = state_file
        if log_level := os.environ.get("SCICALC_LOG_LEVEL"):
            values["log_level"] = log_level.upper()
        if log_file := os.environ.get("SCICALC_LOG_FILE"):
            values["log_file"] = log_file
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
