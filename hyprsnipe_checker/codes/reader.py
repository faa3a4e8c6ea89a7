"""Read the newline-delimited list of codes to check."""

from pathlib import Path

import structlog

from hyprsnipe_checker.errors import InputError


logger = structlog.get_logger()


def parse_codes(text: str) -> list[str]:
    """Split text into trimmed, non-empty codes in file order."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def read_codes(path: Path) -> list[str]:
    """Load codes from a file.

    Args:
        path: Path to the code list.

    Returns:
        Trimmed codes with blank lines removed.

    Raises:
        InputError: If the file cannot be read or contains no codes.
    """
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"failed to read {path}"
        raise InputError(msg, path=str(path)) from e

    codes = parse_codes(contents)
    if not codes:
        msg = f"no codes found in {path}"
        raise InputError(msg, path=str(path))

    logger.debug("codes_loaded", component="codes", path=str(path), count=len(codes))
    return codes
