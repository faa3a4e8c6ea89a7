"""Code list loading."""

from hyprsnipe_checker.codes.reader import parse_codes, read_codes


__all__ = ["parse_codes", "read_codes"]
