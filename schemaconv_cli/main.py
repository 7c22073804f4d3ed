"""schemaconv CLI - Main entry point."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config import settings
from .database import get_introspector, redact_database_url
from .errors import SchemaConvError
from .output import OutputFormat, build_summary, render_json, render_select_list, render_summary

app = typer.Typer(
    name="schemaconv",
    help="Introspect database tables into a portable schema description",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool):
    if verbose:
        level = logging.DEBUG
    else:
        # getLevelName maps known names to ints and returns a string otherwise
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            console.print(f"[yellow]Unknown log level {settings.log_level!r}, using WARNING[/yellow]")
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("table")
def show_table(
    table_reference: str = typer.Argument(..., help="Table name, optionally schema-qualified (schema.table)"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Database URL (or SCHEMACONV_DATABASE_URL env)"),
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema for unqualified table names (default: from settings)"),
    output_format: OutputFormat = typer.Option(OutputFormat.SUMMARY, "--format", "-f", help="Output format"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write output to a file instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Fetch a table's columns and print them in the chosen format."""
    _configure_logging(verbose)

    database_url = url or settings.database_url
    if not database_url:
        console.print("[red]No database URL. Pass --url or set SCHEMACONV_DATABASE_URL.[/red]")
        raise typer.Exit(1)

    try:
        with get_introspector(
            database_url,
            default_schema=schema or settings.default_schema,
            connect_timeout=settings.connect_timeout,
        ) as introspector:
            table = introspector.fetch_table(table_reference)
    except SchemaConvError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    if output_format == OutputFormat.SUMMARY and not output:
        if not table.columns:
            console.print(f"[yellow]No columns found for {table_reference}[/yellow]")
            return
        console.print(build_summary(table))
        return

    if output_format == OutputFormat.SUMMARY:
        text = render_summary(table)
    elif output_format == OutputFormat.JSON:
        text = render_json(table)
    else:
        text = render_select_list(introspector, table)

    if output:
        try:
            output.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error writing {output}: {e.strerror or e}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Wrote {len(table.columns)} columns to {output}[/green]")
    else:
        typer.echo(text)


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    if settings.database_url:
        console.print(f"  Database URL: {redact_database_url(settings.database_url)}")
    else:
        console.print("  Database URL: Not set")
    console.print(f"  Default Schema: {settings.default_schema}")
    console.print(f"  Connect Timeout: {settings.connect_timeout or 'Driver default'}")
    console.print(f"  Log Level: {settings.log_level}")


@app.callback()
def main():
    """
    schemaconv - Read table schemas from a database catalog.

    Examples:

        schemaconv table users --url postgres://localhost/app

        schemaconv table audit.events --format json -o events.json

        schemaconv table users --format select-list
    """
    pass


if __name__ == "__main__":
    app()
