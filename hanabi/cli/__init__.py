"""Command-line helpers for inspecting Hanabi cards."""

from .main import app, main

__all__ = ["app", "main"]
