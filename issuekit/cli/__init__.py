"""Command-line interface."""

from .app import app, main
from .prompt import prompt_yes_no

__all__ = ["app", "main", "prompt_yes_no"]
