from __future__ import annotations

import sys
import logging
import pathlib
from typing import List, Optional

import typer
import structlog
from rich.console import Console
from rich.markup import escape

from .checksum import compute_check
from .config import load_config, RutcheckConfig
from .errors import RutError
from .formatter import Style
from .schema import ParsedRut
from .scanner import parse

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="rutcheck: validate and format Chilean RUTs")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"rutcheck {__version__}")
        raise typer.Exit()


def _reject(raw: str, err: RutError) -> None:
    log.warning("rut_rejected", input=raw, kind=err.kind.value)
    console.print(f"[red]{escape(repr(raw))}: {escape(str(err))}[/red]")
    raise typer.Exit(code=2)


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .rutcheck.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    ctx.obj = {"config": load_config(config) if config else RutcheckConfig()}
    if verbose:
        log.info("verbose_enabled")
    if config:
        log.debug("config_loaded", path=str(config))


@app.command()
def validate(
    ruts: List[str] = typer.Argument(..., help="One or more RUTs, e.g. 12.345.678-5"),
):
    """Check each RUT; exit 1 if any is invalid."""
    all_ok = True
    for raw in ruts:
        try:
            ok = parse(raw).is_valid()
        except RutError as e:
            log.warning("rut_rejected", input=raw, kind=e.kind.value)
            ok = False
        all_ok = all_ok and ok
        status = "[green]valid[/green]" if ok else "[red]invalid[/red]"
        console.print(f"{escape(raw)}: {status}")
    if not all_ok:
        raise typer.Exit(code=1)


@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    rut: str = typer.Argument(..., help="RUT to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object instead of a table"),
):
    """Show the body, check character and validity of a RUT."""
    cfg: RutcheckConfig = ctx.obj["config"]
    try:
        parsed = parse(rut)
    except RutError as e:
        _reject(rut, e)
    result = ParsedRut.from_rut(parsed, cfg.output.style)
    if as_json or cfg.output.as_json:
        typer.echo(result.model_dump_json())
        return
    console.print(f"body:      {result.body}")
    console.print(f"check:     {result.check}")
    console.print(f"valid:     {'yes' if result.valid else 'no'}")
    console.print(f"formatted: {result.formatted}")


@app.command("format")
def format_cmd(
    ctx: typer.Context,
    rut: str = typer.Argument(..., help="RUT to reformat"),
    style: Optional[Style] = typer.Option(
    None, "--style",
    help="Output layout (defaults to the configured style)",
    case_sensitive=False
),
):
    """Re-render a RUT in one of the canonical layouts."""
    cfg: RutcheckConfig = ctx.obj["config"]
    try:
        parsed = parse(rut)
    except RutError as e:
        _reject(rut, e)
    typer.echo(parsed.render(style or cfg.output.style))


@app.command("check-digit")
def check_digit(body: int = typer.Argument(..., min=0, help="RUT number without check character")):
    """Compute the check character for a RUT body."""
    typer.echo(compute_check(body))
