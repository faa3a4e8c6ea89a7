"""Command-line interface."""

from hyprsnipe_checker.cli.main import cli


__all__ = ["cli"]
