"""Textual applications."""

from .calculator import CalculatorApp

__all__ = ["CalculatorApp"]
