"""Core utilities and base classes for Textual applications."""

from .base import AppConfig, BaseTextualApp, StatusWidget

__all__ = [
    "BaseTextualApp",
    "AppConfig",
    "StatusWidget",
]
