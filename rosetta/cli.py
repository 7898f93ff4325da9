"""Rosetta CLI entry point."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from rosetta import __version__
from rosetta.errors import MissingArgument, NetworkError, NoMatches, RosettaError
from rosetta.orchestration.context import AppContext

app = typer.Typer(
    name="rosetta",
    help="Rosetta snippets: quickly find rosettacode.org tasks for your language.",
    add_completion=False,
    no_args_is_help=True,
)

NETWORK_FAILURE_MESSAGE = (
    "Couldn't fetch the tasks because the lookup didn't work. "
    "Check your internet connection."
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Rosetta snippets {__version__}")
        raise typer.Exit()


def _fail(exc: RosettaError) -> typer.Exit:
    """Report ``exc`` to the user and return the matching typer.Exit."""
    if isinstance(exc, NetworkError):
        typer.echo(NETWORK_FAILURE_MESSAGE, err=True)
    elif isinstance(exc, MissingArgument):
        typer.echo(str(exc))
    elif not isinstance(exc, NoMatches):  # selector already printed "Try again!"
        typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(exc.exit_code)


def _context(ctx: typer.Context) -> AppContext:
    return ctx.find_object(AppContext)


@app.callback()
def main(
    ctx: typer.Context,
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
    """Set up configuration and logging, then start fetching the task list."""
    if ctx.obj is None:
        from rosetta.config import load_config
        from rosetta.logging_setup import console_level_for, setup_logging

        config = load_config()
        setup_logging(
            log_file=config.storage.log_path,
            console_level=console_level_for(config.output.verbosity),
        )
        ctx.obj = AppContext.from_config(config)

    ctx.obj.start_background_fetch()


@app.command("language")
def language_command(
    ctx: typer.Context,
    language: Annotated[
        Optional[str], typer.Argument(help="Language to search for, e.g. Go")
    ] = None,
) -> None:
    """Set the language for Rosetta."""
    from rosetta.orchestration.commands import set_language

    try:
        set_language(_context(ctx), language)
    except RosettaError as exc:
        raise _fail(exc) from exc


@app.command("reset")
def reset_command(ctx: typer.Context) -> None:
    """Remove and reset all your settings."""
    from rosetta.orchestration.commands import reset_settings

    reset_settings(_context(ctx))
    typer.echo("Deleted settings!")


@app.command("settings")
def settings_command(ctx: typer.Context) -> None:
    """Show all your settings."""
    from rosetta.orchestration.commands import describe_settings

    try:
        line = describe_settings(_context(ctx))
    except RosettaError as exc:
        raise _fail(exc) from exc
    typer.echo("Your settings:")
    typer.echo(f"    {line}")


@app.command("search")
def search_command(
    ctx: typer.Context,
    term: Annotated[
        Optional[str], typer.Argument(help="Part of the task name; omit to list every task")
    ] = None,
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Search for a specific language"),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option("--raw", "-r", help="Only print the url instead of opening it"),
    ] = False,
) -> None:
    """Search the rosettacode.org snippets repository."""
    from rosetta.orchestration.commands import run_search

    try:
        run_search(_context(ctx), term, language=language, raw=raw, emit=typer.echo)
    except RosettaError as exc:
        raise _fail(exc) from exc


if __name__ == "__main__":
    app()
