"""Allow ``python -m hyprsnipe_checker``."""

from hyprsnipe_checker.cli.main import cli


if __name__ == "__main__":
    cli()
