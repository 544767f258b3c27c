"""Command-line interface for cffkit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cffkit.errors import CffError
from cffkit.file import CffFile
from cffkit.formatters import formatter_for, list_formatters
from cffkit.settings import get_settings

console = Console()
app = typer.Typer(help="cffkit – CITATION.cff validation and citation output")
logger = structlog.get_logger(__name__)


def configure_logging(level: str) -> None:
    """Send structlog output to stderr, filtered at ``level``."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def main() -> None:
    configure_logging(get_settings().log_level)


def _load(path: Path) -> CffFile:
    try:
        return CffFile.read(path)
    except FileNotFoundError as exc:
        console.print(f"[red]No such file: {path}[/red]")
        raise typer.Exit(code=1) from exc
    except yaml.YAMLError as exc:
        console.print(f"[red]Could not parse {path}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    except CffError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


@app.command()
def cite(
    path: Path = typer.Argument(Path("CITATION.cff"), help="CITATION.cff file to cite"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Citation format label"),
    no_preferred: bool = typer.Option(False, "--no-preferred", help="Ignore preferred-citation"),
    style: Optional[str] = typer.Option(None, help="CSL style name or path (CSL only)"),
    locale: Optional[str] = typer.Option(None, help="CSL locale (CSL only)"),
) -> None:
    """Print a citation for a CITATION.cff file."""
    label = format or get_settings().default_format
    formatter = formatter_for(label)
    if formatter is None:
        console.print(f"[red]Unknown format '{label}'. Available: {', '.join(list_formatters())}[/red]")
        raise typer.Exit(code=1)

    logger.debug("cli.cite", path=str(path), format=formatter.label)
    cff = _load(path)
    options = {key: value for key, value in (("style", style), ("locale", locale)) if value}
    output = formatter.format(cff.index, preferred_citation=not no_preferred, **options)
    if not output:
        console.print(f"[yellow]{path.name} cannot be cited as {formatter.label}: authors or title missing[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(output)


@app.command()
def validate(
    path: Path = typer.Argument(Path("CITATION.cff"), help="CITATION.cff file to validate"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first error"),
    validate_as: Optional[str] = typer.Option(None, "--validate-as", help="Schema version to use"),
    check_filename: bool = typer.Option(
        True, "--check-filename/--no-check-filename", help="Require the file to be named CITATION.cff"
    ),
) -> None:
    """Validate a CITATION.cff file against the CFF schema."""
    cff = _load(path)
    ok, errors, invalid_filename = cff.validate(
        fail_fast=fail_fast, fail_on_filename=check_filename, validate_as=validate_as
    )
    if ok:
        console.print(f"[green]{path.name} is valid.[/green]")
        return

    if errors:
        table = Table(title=f"Validation errors: {path.name}")
        table.add_column("Location")
        table.add_column("Keyword")
        table.add_column("Message", overflow="fold")
        for error in errors:
            table.add_row(escape(error.location), error.keyword, escape(error.message))
        console.print(table)
    if check_filename and invalid_filename:
        console.print(f"[red]{path.name} should be named CITATION.cff[/red]")
    raise typer.Exit(code=1)


@app.command()
def formats() -> None:
    """List the registered citation formats."""
    for label in list_formatters():
        typer.echo(label)


@app.command()
def config(
    json_output: bool = typer.Option(False, "--json", help="Output settings as JSON"),
) -> None:
    """Display the resolved settings."""
    settings = get_settings()
    if json_output:
        typer.echo(settings.model_dump_json(indent=2))
        return
    table = Table(title="cffkit Settings")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
