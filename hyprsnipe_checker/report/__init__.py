"""Plain-text report of check results."""

from hyprsnipe_checker.report.writer import ReportWriter, WrittenReport, render_report


__all__ = ["ReportWriter", "WrittenReport", "render_report"]
