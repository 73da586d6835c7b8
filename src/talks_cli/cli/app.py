"""
Main CLI application entry point.

This module contains the main Typer application and command handlers
for Talks CLI.
"""

from typing import NoReturn, Optional
import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from talks_cli import PACKAGE_NAME, VERSION
from talks_cli.config.settings import TalksCliSettings
from talks_cli.core.client import TalksClient
from talks_cli.core.errors import MissingFieldError, ServerError, TalksError
from talks_cli.services.talks import (
    MISSING_FIELD_MESSAGE,
    SubmitOptions,
    list_talks,
    render_talks,
    submit_talk,
)

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name=PACKAGE_NAME,
    help="Talks CLI - list the scheduled talks and submit new ones.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich console for diagnostics; stdout is reserved for command output
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        typer.echo(f"{PACKAGE_NAME} {VERSION}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("talks_cli").setLevel(level)


def _fail(error: TalksError) -> NoReturn:
    """Report an unrecoverable error on stderr and exit non-zero."""
    logger.debug(f"Command failed: {error.to_dict()}")
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def _settings(ctx: typer.Context) -> TalksCliSettings:
    if isinstance(ctx.obj, TalksCliSettings):
        return ctx.obj
    return TalksCliSettings()


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr"),
) -> None:
    """
    Talks CLI - list the scheduled talks and submit new ones.

    Use [bold]talks[/bold] to print the visible talks and [bold]new[/bold]
    to submit a talk.
    """
    if ctx.invoked_subcommand is None:
        # Rich help is printed by Typer itself; plain help comes back as text
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        raise typer.Exit()

    try:
        settings = TalksCliSettings()
    except ValidationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command(
    "talks",
    short_help="Print visible talks",
    context_settings={"allow_extra_args": True},
)
def talks_command(
    ctx: typer.Context,
    talk_type: str = typer.Option(
        "", "--type", "-t", help="Type of a talk. Leave empty to display all"
    ),
) -> None:
    """Prints any talk in the talks database that has the hidden flag off."""
    client = TalksClient.from_settings(_settings(ctx))

    try:
        talks = asyncio.run(list_talks(client, talk_type))
    except TalksError as e:
        _fail(e)

    for line in render_talks(talks):
        typer.echo(line)


@app.command(
    "new",
    short_help="Create new talk",
    context_settings={"allow_extra_args": True},
)
def new_command(
    ctx: typer.Context,
    name: str = typer.Option("", "--name", "-n", help="The presenter of the talk"),
    talk_type: str = typer.Option("", "--type", "-t", help="Type of a talk"),
    desc: str = typer.Option("", "--desc", "-d", help="Description of a talk"),
) -> None:
    """
    Creates a new talk with three following arguments of name, type, and description.

    Do note talk submission is only allowed on COSI's subnets.
    """
    options = SubmitOptions(name=name, type=talk_type, desc=desc)
    client = TalksClient.from_settings(_settings(ctx))

    try:
        result = asyncio.run(submit_talk(client, options))
    except MissingFieldError as e:
        logger.debug(f"Missing fields: {e.details.get('fields')}")
        typer.echo(MISSING_FIELD_MESSAGE)
        raise typer.Exit(1)
    except TalksError as e:
        _fail(e)

    if not result.accepted:
        response = result.response
        _fail(ServerError(
            "Registry rejected the talk",
            status=response.status,
            body=response.text,
        ))

    typer.echo(f"Submitted talk: {result.talk.display_line()}")


def main() -> None:
    """Console script entry point."""
    app(prog_name=PACKAGE_NAME)
