"""CLI de blackd-client (Typer).

Flujo de una invocación:
1. Flags (`--url`, `--line-length`) parseados por Typer; flags desconocidos
   terminan con código 1 antes de tocar la red.
2. `pyproject.toml` localizado una sola vez desde el CWD hacia arriba.
3. stdin completo -> un POST a blackd -> resultado clasificado.
4. Código formateado (o el original si no cambió) a stdout; errores a stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import typer
from pydantic import ValidationError

from adapters.blackd_client import BlackdClient
from adapters.http_client import build_client
from adapters.pyproject_config import locate_and_parse
from adapters.stdio import read_stdin, write_stdout
from cli import exit_codes
from cli.ui_components import build_error_console, print_error, version_line
from core.config import APP_NAME, AppSettings
from core.domain.models import DEFAULT_BLACKD_URL, FormatOptions, ServiceEndpoint
from core.errors import BlackdClientError
from core.logging_setup import configure_logging
from core.services.format_pipeline import FormatJob, run_job

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Tiny HTTP client for the Black (blackd) Python code formatter.",
)

_err_console = build_error_console()
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_line())
        raise typer.Exit()


@app.command()
def format_stdin(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        metavar="URL",
        help="URL of blackd server",
        show_default=DEFAULT_BLACKD_URL,
    ),
    line_length: Optional[int] = typer.Option(
        None,
        "--line-length",
        min=1,
        metavar="LEN",
        help="Custom max-line-length",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version information",
    ),
) -> None:
    """Read Python source from stdin, format it with blackd and print the result."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"Invalid environment configuration: {exc}")
        raise typer.Exit(code=exit_codes.FAILURE)

    configure_logging(settings.log_level, verbose=verbose)

    try:
        config_options = locate_and_parse(Path.cwd(), settings.config_filename)
        job = FormatJob(
            source_text=read_stdin(),
            endpoint=ServiceEndpoint(url=url or settings.url),
            config_options=config_options,
            cli_options=FormatOptions(line_length=line_length),
        )
        with build_client(settings) as http:
            result = run_job(job, transport=BlackdClient(http))
    except BlackdClientError as exc:
        logger.debug("Aborting: %r", exc)
        print_error(_err_console, str(exc))
        raise typer.Exit(code=exit_codes.FAILURE)

    outcome = result.outcome
    if outcome.is_error:
        print_error(_err_console, outcome.error_message())
        raise typer.Exit(code=exit_codes.FAILURE)

    write_stdout(outcome.output or "")


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta la CLI y devuelve el código de salida en vez de terminar el proceso.

    Typer resuelve por sí mismo los errores de uso (mensaje en stderr, código 2);
    aquí cualquier salida distinta de 0 se normaliza a `FAILURE`.
    """

    try:
        app(args=list(argv) if argv is not None else None, prog_name=APP_NAME)
    except SystemExit as exc:
        return exit_codes.SUCCESS if exc.code in (None, 0) else exit_codes.FAILURE
    return exit_codes.SUCCESS


def run() -> None:
    sys.exit(main())
