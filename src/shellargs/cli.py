"""Command-line interface for shellargs."""

from __future__ import annotations

import json

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from shellargs.args import StructuredArgs
from shellargs.config import get_settings
from shellargs.errors import ShellArgsError
from shellargs.lexer import argv
from shellargs.logging_utils import configure_logging
from shellargs.printer import ArgsPrinter

app = typer.Typer(
    name="shellargs",
    help="Split shell-style strings and inspect the parsed arguments.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ...)"),
) -> None:
    settings = get_settings()
    configure_logging(log_level or settings.log_level, profile=settings.log_profile)


def _fail(exc: ShellArgsError) -> None:
    logger.debug("command failed: {!r}", exc)
    typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2)


def _wants_json(as_json: bool) -> bool:
    return as_json or get_settings().output_format == "json"


def _option_payload(args: StructuredArgs) -> dict[str, str | list[str]]:
    payload: dict[str, str | list[str]] = {}
    for name, option in args.options.items():
        values = option.optional_many()
        payload[name] = values[0] if len(values) == 1 else values
    return payload


@app.command("split")
def split(
    text: str = typer.Argument(..., help="Shell-style string to split"),
    as_json: bool = typer.Option(False, "--json", help="Print tokens as a JSON array"),
) -> None:
    """Split TEXT into tokens and print one per line."""

    try:
        tokens = argv(text)
    except ShellArgsError as exc:
        _fail(exc)
        return

    if _wants_json(as_json):
        typer.echo(json.dumps(tokens))
        return
    for token in tokens:
        typer.echo(token)


@app.command("parse")
def parse(
    text: str = typer.Argument(..., help="Shell-style string to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Parse TEXT into positional parameters and named options."""

    try:
        args = StructuredArgs.parse_string(text)
    except ShellArgsError as exc:
        _fail(exc)
        return

    if _wants_json(as_json):
        typer.echo(json.dumps({"parameters": args.parameters_as_list(), "options": _option_payload(args)}))
        return

    table = Table(title="Arguments")
    table.add_column("Kind")
    table.add_column("Name")
    table.add_column("Value")
    for index, parameter in enumerate(args.parameters):
        table.add_row("parameter", f"#{index}", parameter)
    for name, option in args.options.items():
        for value in option.optional_many():
            table.add_row("option", name, value)
    Console().print(table)


@app.command("render")
def render(
    text: str = typer.Argument(..., help="Shell-style string to parse and re-render"),
    quote_style: str | None = typer.Option(None, "--quote-style", help="auto, single or double"),
) -> None:
    """Print the canonical form of the arguments parsed from TEXT."""

    try:
        printer = ArgsPrinter(quote_style or get_settings().quote_style)  # type: ignore[arg-type]
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--quote-style") from exc

    try:
        args = StructuredArgs.parse_string(text)
    except ShellArgsError as exc:
        _fail(exc)
        return

    typer.echo(printer.render(args))
