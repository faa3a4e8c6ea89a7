"""Render and atomically write the grouped results report.

Report layout::

    200:
    <code>

    400:
    <code>

    OTHER:
    <status>: <code>
"""

import contextlib
import hashlib
from dataclasses import dataclass
from pathlib import Path

import structlog

from hyprsnipe_checker.check.models import ResultBuckets
from hyprsnipe_checker.errors import OutputError


logger = structlog.get_logger()


@dataclass(frozen=True)
class WrittenReport:
    """Information about a written report file."""

    path: str
    bytes_written: int
    sha256: str


def render_report(buckets: ResultBuckets) -> str:
    """Render buckets as the three-section text report.

    Args:
        buckets: Classified results.

    Returns:
        Report text ending with a newline.
    """
    lines: list[str] = ["200:"]
    lines.extend(buckets.ok)
    lines.append("")

    lines.append("400:")
    lines.extend(buckets.bad)
    lines.append("")

    lines.append("OTHER:")
    lines.extend(f"{status}: {code}" for code, status in buckets.other)

    return "\n".join(lines) + "\n"


class ReportWriter:
    """Writes the report with atomic replace semantics.

    Content goes to a temporary sibling file that is then renamed over
    the target, so readers never observe a half-written report.
    """

    def __init__(self) -> None:
        """Initialize the report writer."""
        self._log = logger.bind(component="report")

    def write(self, path: Path, buckets: ResultBuckets) -> WrittenReport:
        """Write the report, replacing any previous one.

        Args:
            path: Target report path.
            buckets: Classified results.

        Returns:
            WrittenReport with path, size, and checksum.

        Raises:
            OutputError: If the file cannot be written.
        """
        content = render_report(buckets)
        content_bytes = content.encode("utf-8")

        temp_path = path.with_name(path.name + ".tmp")
        try:
            temp_path.write_bytes(content_bytes)
            temp_path.replace(path)
        except OSError as e:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            msg = f"failed to write results to {path}"
            raise OutputError(msg, path=str(path)) from e

        sha256 = hashlib.sha256(content_bytes).hexdigest()
        self._log.info(
            "report_written",
            path=str(path),
            bytes=len(content_bytes),
            sha256=sha256[:12],
        )
        return WrittenReport(
            path=str(path),
            bytes_written=len(content_bytes),
            sha256=sha256,
        )
