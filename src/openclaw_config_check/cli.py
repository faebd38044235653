"""Typer CLI entrypoint for openclaw_config_check."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from openclaw_config_check.config import CheckSettings, load_settings
from openclaw_config_check.errors import ConfigCheckError
from openclaw_config_check.logging_utils import configure_logging
from openclaw_config_check.pipeline import run_check, run_resolve
from openclaw_config_check.validate.reports import SUCCESS_LINE

app = typer.Typer(
    add_completion=False,
    help="OpenClaw config validity checker.",
    no_args_is_help=True,
)


def _load_settings_or_exit(settings_file: Path | None) -> CheckSettings:
    try:
        return load_settings(settings_file)
    except ValidationError as exc:
        typer.echo(f"Invalid checker settings: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _load_and_configure_logger(settings_file: Path | None, verbose: bool) -> tuple[CheckSettings, logging.Logger]:
    settings = _load_settings_or_exit(settings_file)
    level = "DEBUG" if verbose else settings.logging.level
    logger = configure_logging(level, log_file=settings.logging.log_file)
    return settings, logger


def _fail(exc: ConfigCheckError) -> typer.Exit:
    typer.echo(str(exc), err=True)
    return typer.Exit(code=1)


@app.command("check")
def check(
    settings_file: Path | None = typer.Option(
        None,
        "--settings-file",
        help="Optional checker settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution details to stderr."),
) -> None:
    """Validate $OPENCLAW_CONFIG_PATH with the validator built under $OPENCLAW_SRC."""

    settings, logger = _load_and_configure_logger(settings_file, verbose)
    try:
        run_check(settings, logger=logger)
    except ConfigCheckError as exc:
        raise _fail(exc) from exc
    typer.echo(SUCCESS_LINE)


@app.command("resolve")
def resolve(
    settings_file: Path | None = typer.Option(
        None,
        "--settings-file",
        help="Optional checker settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution details to stderr."),
) -> None:
    """Show which module and symbol provide the validator."""

    settings, logger = _load_and_configure_logger(settings_file, verbose)
    try:
        resolved = run_resolve(settings, logger=logger)
    except ConfigCheckError as exc:
        raise _fail(exc) from exc
    typer.echo(f"source: {resolved.source}")
    typer.echo(f"symbol: {resolved.symbol}")


@app.command("show-config")
def show_config(
    settings_file: Path | None = typer.Option(
        None,
        "--settings-file",
        help="Optional checker settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Print the effective checker settings after env overrides."""

    settings = _load_settings_or_exit(settings_file)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


def main() -> None:
    app()
