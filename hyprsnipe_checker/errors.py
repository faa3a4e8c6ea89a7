"""Error types for the checker.

Every fatal condition of a run is raised as a ``CheckerError`` subclass so
the CLI can print one consistent message and exit non-zero.
"""

from enum import Enum


class CheckerErrorClass(str, Enum):
    """Classification of fatal checker errors.

    - CONFIG: Missing or invalid environment configuration
    - INPUT: Code list missing, unreadable, or empty
    - FETCH: Non-transient HTTP/network failure
    - OUTPUT: Report file could not be written
    """

    CONFIG = "CONFIG"
    INPUT = "INPUT"
    FETCH = "FETCH"
    OUTPUT = "OUTPUT"


class CheckerError(Exception):
    """Base exception for fatal checker errors."""

    error_class: CheckerErrorClass = CheckerErrorClass.CONFIG

    def __init__(
        self,
        message: str,
        details: dict[str, str | int | None] | None = None,
    ) -> None:
        """Initialize the checker error.

        Args:
            message: Human-readable error message.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | None]]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(CheckerError):
    """Configuration could not be loaded or validated."""

    error_class = CheckerErrorClass.CONFIG


class InputError(CheckerError):
    """The code list could not be read or yielded no codes."""

    error_class = CheckerErrorClass.INPUT

    def __init__(self, message: str, path: str) -> None:
        """Initialize the input error.

        Args:
            message: Human-readable error message.
            path: Path of the code list file.
        """
        super().__init__(message, details={"path": path})
        self.path = path


class OutputError(CheckerError):
    """The report could not be written."""

    error_class = CheckerErrorClass.OUTPUT

    def __init__(self, message: str, path: str) -> None:
        """Initialize the output error.

        Args:
            message: Human-readable error message.
            path: Report path that failed.
        """
        super().__init__(message, details={"path": path})
        self.path = path


def format_error_chain(error: BaseException) -> str:
    """Render an exception and its causes, one line per link.

    Args:
        error: The outermost exception.

    Returns:
        Multi-line string starting with ``Error:``.
    """
    lines = [f"Error: {error}"]
    cause = _next_cause(error)
    seen = {id(error)}
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        lines.append(f"  caused by: {type(cause).__name__}: {cause}")
        cause = _next_cause(cause)
    return "\n".join(lines)


def _next_cause(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
