"""Scientific calculator for the terminal, with an MCP tool interface."""

__version__ = "0.1.0"
