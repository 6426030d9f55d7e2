"""Base classes and utilities for the calculator's Textual front end."""

from pydantic import BaseModel
from textual.app import App
from textual.widgets import Static


class AppConfig(BaseModel):
    """Metadata describing a Textual application."""
    name: str
    description: str
    version: str = "0.1.0"
    author: str = "scicalc"
    tags: list[str] = []


class BaseTextualApp(App):
    """Base class for the Textual applications shipped with scicalc."""

    # Application metadata
    APP_CONFIG: AppConfig
    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    @classmethod
    def get_config(cls) -> AppConfig:
        """Get application configuration."""
        return cls.APP_CONFIG


class StatusWidget(Static):
    """Banner that shows a transient status line and hides when empty."""

    def __init__(self, initial_status: str = "", **kwargs):
        super().__init__(initial_status, **kwargs)
        self.add_class("status-widget")
        self.display = bool(initial_status)

    def update_status(self, status: str, status_type: str = "info") -> None:
        """Show ``status`` styled by type, or hide the banner if it is empty."""
        self.update(status)
        self.display = bool(status)
        # Remove existing status classes
        self.remove_class("status-info", "status-warning", "status-error", "status-success")
        self.add_class(f"status-{status_type}")
