"""CLI commands for the code checker."""

import logging
import sys
import uuid
from pathlib import Path

import click
import structlog

from hyprsnipe_checker import __version__
from hyprsnipe_checker.check.models import CheckResult
from hyprsnipe_checker.check.runner import CheckRunner
from hyprsnipe_checker.codes.reader import read_codes
from hyprsnipe_checker.errors import CheckerError, format_error_chain
from hyprsnipe_checker.fetch.client import StatusFetcher
from hyprsnipe_checker.fetch.metrics import FetchMetrics
from hyprsnipe_checker.fetch.redact import redact_headers, redact_url_credentials
from hyprsnipe_checker.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
)
from hyprsnipe_checker.report.writer import ReportWriter
from hyprsnipe_checker.settings.app import AppSettings, load_settings


logger = structlog.get_logger()


def _settings_overrides(
    codes_path: Path | None,
    results_path: Path | None,
    max_retries: int | None,
) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if codes_path is not None:
        overrides["codes_file"] = codes_path
    if results_path is not None:
        overrides["results_file"] = results_path
    if max_retries is not None:
        overrides["max_retries"] = max_retries
    return overrides


def _echo_result(result: CheckResult) -> None:
    click.echo(f"{result.code}: {result.status_code} in {result.elapsed_ms} ms")


def _fail(error: CheckerError) -> None:
    """Report a fatal error and exit with status 1."""
    logger.error("check_run_failed", **error.to_dict())
    click.echo(format_error_chain(error), err=True)
    sys.exit(1)


def _execute_run(settings: AppSettings) -> None:
    """Run the full check and write the report.

    Args:
        settings: Validated settings.
    """
    log = logger.bind(component="cli", command="run")

    codes = read_codes(settings.codes_file)
    click.echo(f"Checking {len(codes)} codes...")

    fetch_config = settings.fetch_config()
    log.info(
        "check_run_started",
        codes=len(codes),
        codes_file=str(settings.codes_file),
        headers=redact_headers(fetch_config.build_headers()),
        max_retries=fetch_config.retry_policy.max_retries,
    )

    with fetch_config.build_client() as client:
        fetcher = StatusFetcher(client, fetch_config.retry_policy)
        runner = CheckRunner(
            fetcher,
            base_url=settings.base_url,
            request_delay_ms=settings.request_delay_ms,
            on_result=_echo_result,
        )
        buckets = runner.run(codes)

    ReportWriter().write(settings.results_file, buckets)
    log.info("fetch_metrics", **FetchMetrics.get_instance().to_dict())

    click.echo(
        f"Done. 200: {len(buckets.ok)}, 400: {len(buckets.bad)}, "
        f"Other: {len(buckets.other)}. See {settings.results_file}."
    )


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Check a list of codes against a web endpoint."""


@cli.command()
@click.option(
    "--codes",
    "codes_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Newline-delimited code list (default: CODES_FILE or .data.txt).",
)
@click.option(
    "--out",
    "results_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Report path, overwritten each run (default: RESULTS_FILE or results.txt).",
)
@click.option(
    "--max-retries",
    type=click.IntRange(min=0),
    default=None,
    help="Give up on transient failures after N retries (default: retry forever).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Use JSON format for logs (default: false).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
def run(
    codes_path: Path | None,
    results_path: Path | None,
    max_retries: int | None,
    json_logs: bool,
    verbose: bool,
) -> None:
    """Check every code and write the grouped report.

    Configuration and the code list are validated before any network
    request is made.
    """
    configure_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        json_format=json_logs,
    )
    bind_run_context(uuid.uuid4().hex[:12])
    FetchMetrics.reset()

    try:
        settings = load_settings(
            **_settings_overrides(codes_path, results_path, max_retries)
        )
        _execute_run(settings)
    except CheckerError as e:
        _fail(e)
    finally:
        clear_run_context()


@cli.command()
@click.option(
    "--codes",
    "codes_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Newline-delimited code list (default: CODES_FILE or .data.txt).",
)
def validate(codes_path: Path | None) -> None:
    """Validate configuration and the code list without any requests."""
    configure_logging(level=logging.WARNING)

    try:
        settings = load_settings(**_settings_overrides(codes_path, None, None))
        codes = read_codes(settings.codes_file)
    except CheckerError as e:
        _fail(e)
        return

    policy = settings.fetch_config().retry_policy
    click.echo("Configuration is valid!")
    click.echo(f"  Base URL: {redact_url_credentials(settings.base_url)}")
    click.echo(f"  Codes: {len(codes)} ({settings.codes_file})")
    click.echo(f"  Report: {settings.results_file}")
    click.echo(
        "  Max retries: "
        + ("unbounded" if policy.max_retries is None else str(policy.max_retries))
    )
