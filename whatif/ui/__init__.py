"""Command-line interface for the what-if calculator."""

from .cli import app, main

__all__ = ["app", "main"]
