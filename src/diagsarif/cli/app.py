# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from diagsarif import __version__
from diagsarif.ci.exit_codes import CIExitCode, diagnostics_to_exit_code
from diagsarif.core.config import get_settings
from diagsarif.core.exceptions import DiagSarifError
from diagsarif.core.logging import setup_logging
from diagsarif.ingestion.loader import load_diagnostics
from diagsarif.models.diagnostic import RenderOptions
from diagsarif.sarif.document import render

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="diagsarif",
    help="Convert compiler diagnostics into SARIF 2.1.0 reports",
    no_args_is_help=True,
)

InputArg = Annotated[
    Path | None,
    typer.Argument(help="Diagnostics file (JSON array or JSON Lines); stdin when omitted or '-'"),
]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"diagsarif {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


@app.command()
def convert(
    input_path: InputArg = None,
    root: Annotated[
        str | None,
        typer.Option("--root", "-r", help="Directory artifact URIs are made relative to"),
    ] = None,
    pretty: Annotated[
        bool | None,
        typer.Option("--pretty/--no-pretty", help="Pretty-print the JSON document"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Exit non-zero when errors or warnings are present"),
    ] = False,
) -> None:
    """Convert diagnostics into a SARIF document."""
    settings = get_settings()
    options = RenderOptions(
        root=root or settings.root or Path.cwd().as_posix(),
        pretty=settings.pretty if pretty is None else pretty,
        empty_run_tool_name=settings.empty_run_tool_name,
    )

    try:
        diagnostics = load_diagnostics(input_path)
        document = render(diagnostics, options)
    except DiagSarifError as exc:
        logger.debug("Conversion failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(int(CIExitCode.CONVERSION_ERROR)) from exc

    _write_output(document, output)

    if ci_mode:
        raise typer.Exit(int(diagnostics_to_exit_code(diagnostics)))


@app.command()
def summary(input_path: InputArg = None) -> None:
    """Print diagnostic counts per producing tool and severity."""
    from diagsarif.cli.formatters.console import format_summary

    try:
        diagnostics = load_diagnostics(input_path)
    except DiagSarifError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(int(CIExitCode.CONVERSION_ERROR)) from exc
    format_summary(diagnostics)


def _write_output(document: bytes, output: Path | None) -> None:
    if output:
        output.write_bytes(document)
        typer.echo(f"Output written to {output}", err=True)
    else:
        typer.echo(document)
