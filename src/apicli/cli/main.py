"""Main CLI application."""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import app_api
from ..contracts.errors import ApiCliError

app = typer.Typer(
    name="apicli",
    help="Call HTTP APIs described in a local catalog.",
)
console = Console()
err_console = Console(stderr=True)

ConfigOption = typer.Option(None, "--config", "-c", help="Catalog file path")


def configure_logging(verbose: bool = False) -> None:
    """Send structlog output to stderr, debug level when verbose."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def parse_vars(params: List[str]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` arguments into an override mapping."""
    overrides: Dict[str, str] = {}
    for param in params:
        key, sep, value = param.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{param}'")
        overrides[key] = value
    return overrides


def _fail(message: str, details: Optional[Dict[str, Any]] = None) -> None:
    err_console.print(f"❌ {escape(message)}", style="red")
    if details:
        err_console.print(f"Details: {escape(str(details))}")
    raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Call HTTP APIs described in a local catalog."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command("list")
def list_apis(
    pattern: Optional[str] = typer.Argument(None, help="Substring filter on service.name"),
    config: Optional[Path] = ConfigOption,
):
    """List catalog entries as service.name."""

    try:
        apis = app_api.get_apis(config)
    except ApiCliError as e:
        _fail(e.message, e.details)

    for api in apis:
        if pattern is None or pattern in api.api_id:
            typer.echo(api.api_id)


@app.command()
def where(config: Optional[Path] = ConfigOption):
    """Show which catalog file is used."""

    try:
        path = app_api.get_catalog_path(config)
    except ApiCliError as e:
        _fail(e.message, e.details)

    if path is None:
        console.print("No catalog file found", style="yellow")
    else:
        typer.echo(str(path))


@app.command("help")
def help_apis(
    pattern: str = typer.Argument(..., help="Substring filter on service.name"),
    config: Optional[Path] = ConfigOption,
):
    """Show the templates of matching catalog entries."""

    try:
        apis = [api for api in app_api.get_apis(config) if pattern in api.api_id]
    except ApiCliError as e:
        _fail(e.message, e.details)

    if not apis:
        _fail(f"No API matches '{pattern}'")

    for api in apis:
        table = Table(title=api.api_id, show_header=False)
        table.add_column("Field")
        table.add_column("Template", overflow="fold")
        for field in ("method", "url", "headers", "body"):
            value = getattr(api, field)
            if value is None:
                continue
            text = value if isinstance(value, str) else json.dumps(value)
            table.add_row(field, escape(text))
        console.print(table)


@app.command()
def call(
    api_id: str = typer.Argument(..., help="API identifier as service.name"),
    params: Optional[List[str]] = typer.Argument(None, help="Variables as KEY=VALUE"),
    config: Optional[Path] = ConfigOption,
    debug: bool = typer.Option(False, "--debug", help="Print request and response details"),
    timing: bool = typer.Option(False, "--time", help="Print elapsed time"),
    query: Optional[str] = typer.Option(None, "--jq", help="jq filter applied to the response"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the resolved request without sending it"),
):
    """Call an API and print the response body."""

    overrides = parse_vars(params or [])
    service, _, rest = api_id.partition(".")
    name = rest.split(".")[0]

    start = time.perf_counter()
    try:
        if dry_run:
            request = app_api.get_request(service, name, overrides, config)
            typer.echo(json.dumps(request.model_dump(), indent=2))
            return

        result = app_api.get(api_id, vars=overrides, config_path=config, debug=debug)
        if query:
            typer.echo(result.json(query), nl=False)
        else:
            typer.echo(_format_body(result.text()))
    except ApiCliError as e:
        _fail(e.message, e.details)
    except requests.RequestException as e:
        _fail(f"Request failed: {e}")
    finally:
        if timing:
            elapsed_ms = (time.perf_counter() - start) * 1000
            err_console.print(f"{elapsed_ms:.0f}ms", style="dim")


def _format_body(text: str) -> str:
    """Pretty-print JSON bodies, leave anything else untouched."""
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError:
        return text


if __name__ == "__main__":
    app()
