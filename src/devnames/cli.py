"""
devnames CLI - Command-line interface.

Manage device nicknames from the terminal.
"""

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table

from devnames.core.exceptions import DevNamesError, UsageError, format_exception
from devnames.registry.names import NameRegistry
from devnames.registry.storage import CONFIG_ENV_VAR, ConfigStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="devnames",
    help="devnames - human-friendly nicknames for Android device serials",
    no_args_is_help=True,
)
name_app = typer.Typer(
    help=(
        "Manage device nicknames, which are meant to be more human-friendly "
        "compared to the device serials provided by the adb tool."
    ),
    no_args_is_help=True,
)
app.add_typer(name_app, name="name")

console = Console()
err_console = Console(stderr=True)

UNBOUNDED_WIDTH = 10_000


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("DEVNAMES_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _registry(ctx: typer.Context) -> NameRegistry:
    registry = ctx.find_object(NameRegistry)
    if registry is None:
        registry = NameRegistry(ConfigStore())
    return registry


def _fail(error: DevNamesError) -> NoReturn:
    """Report an error and exit; usage errors go through click's usage output."""
    if isinstance(error, UsageError):
        raise typer.BadParameter(
            error.message,
            param_hint=error.argument.upper() if error.argument else None,
        )
    logger.debug("Command failed: %s", error.to_dict())
    err_console.print(f"[red]Error:[/red] {escape(format_exception(error))}")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Config file holding the nicknames",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Set up logging and the config file for subcommands."""
    _configure_logging(verbose)
    ctx.obj = NameRegistry(ConfigStore(config))


@name_app.command("set")
def set_name(
    ctx: typer.Context,
    device_serial: str = typer.Argument(
        ...,
        help=(
            "Device serial (e.g., 'HT4BVWV00023') or alternative device qualifier "
            "(e.g., 'usb:3-3.4.2') from 'adb devices -l'"
        ),
    ),
    nickname: str = typer.Argument(
        ..., help="Alpha-numeric string with no special characters or spaces"
    ),
):
    """
    Set a nickname to be used in place of the device serial.

    There can only be one nickname for a device serial. Setting a nickname
    for a serial that already has one replaces the old nickname.
    """
    registry = _registry(ctx)
    try:
        result = registry.set_name(device_serial, nickname)
    except DevNamesError as e:
        _fail(e)

    if result.replaced:
        console.print(
            f"Replaced nickname [cyan]{escape(result.replaced)}[/cyan] "
            f"of {escape(result.serial)}"
        )
    console.print(
        f"[green]Set:[/green] {escape(result.nickname)} -> {escape(result.serial)}"
    )


@name_app.command("unset")
def unset_name(
    ctx: typer.Context,
    identifier: str = typer.Argument(
        ..., metavar="<device_serial | nickname>", help="Device serial or nickname"
    ),
):
    """Unset a nickname, given either the device serial or the nickname."""
    registry = _registry(ctx)
    try:
        result = registry.unset_name(identifier)
    except DevNamesError as e:
        _fail(e)

    console.print(
        f"[green]Unset:[/green] {escape(result.nickname)} -> {escape(result.serial)}"
    )


@name_app.command("list")
def list_names(ctx: typer.Context):
    """List all the existing nicknames."""
    registry = _registry(ctx)
    try:
        entries = registry.list_names()
    except DevNamesError as e:
        _fail(e)

    table = Table()
    table.add_column("Serial", style="cyan", justify="left", overflow="fold")
    table.add_column("Nickname", justify="left", overflow="fold")

    for entry in entries:
        table.add_row(escape(entry.serial), escape(entry.nickname))

    if console.is_terminal:
        console.print(table)
        return

    # Piped output is never truncated or folded.
    full_width = Measurement.get(console, console.options.update_width(UNBOUNDED_WIDTH), table)
    Console(width=max(console.width, full_width.maximum)).print(table)


@name_app.command("clear-all")
def clear_all(ctx: typer.Context):
    """Clear all the existing nicknames."""
    registry = _registry(ctx)
    try:
        result = registry.clear_all()
    except DevNamesError as e:
        _fail(e)

    console.print(f"Cleared {result.removed} nicknames")


@name_app.command("resolve")
def resolve(
    ctx: typer.Context,
    identifier: str = typer.Argument(
        ..., metavar="<device_serial | nickname>", help="Device serial or nickname"
    ),
):
    """Print the device serial a nickname stands for."""
    registry = _registry(ctx)
    try:
        serial = registry.resolve(identifier)
    except DevNamesError as e:
        _fail(e)

    typer.echo(serial)


@app.command()
def version():
    """Show devnames version."""
    from devnames import __version__

    console.print(f"devnames v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
