from __future__ import annotations

import sys
from pathlib import Path

import typer

from cart_parser.config import get_settings
from cart_parser.errors import ValidationFailed
from cart_parser.infrastructure.file_reader import read_file
from cart_parser.infrastructure.id_source import SequentialIdSource
from cart_parser.orchestrator import CartParser
from cart_parser.reporter import print_result, print_violations
from cart_parser.utils.logging import configure_logging

app = typer.Typer(help="Cart Parser CLI.")


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"json_logs={settings.log_json} | encoding={settings.file_encoding}"
    )


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Cart CSV file to check."),
) -> None:
    """
    Report every violation in a cart file. Exits with code 1 if any are found.
    """
    settings = get_settings()
    try:
        raw_text = read_file(path, encoding=settings.file_encoding)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=2)

    violations = CartParser().validate(raw_text)
    print_violations(violations)
    if violations:
        raise typer.Exit(code=1)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="Cart CSV file to parse."),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the parse result as JSON instead of a table.",
    ),
    sequential_ids: bool = typer.Option(
        False,
        "--sequential-ids",
        help="Number items item-1, item-2, ... instead of random ids.",
    ),
) -> None:
    """
    Parse a cart file into line items and a total.
    """
    parser = CartParser(id_source=SequentialIdSource() if sequential_ids else None)
    try:
        result = parser.parse(path)
    except ValidationFailed as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        print_result(result)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
