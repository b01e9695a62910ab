"""Entry point of the `termux-py` CLI."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from termux_api.adapters.battery import get_battery_status
from termux_api.adapters.json_exporter import dumps_result, export_result_json
from termux_api.cli import doctor
from termux_api.cli.ui_components import (
    build_battery_table,
    build_error_panel,
    build_recipe_panel,
    print_banner,
)
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.errors import TermuxError
from termux_api.core.executor import execute
from termux_api.core.services.recipes import (
    notify_if_low_battery,
    speak_battery_status,
    take_and_share_photo,
)

app = typer.Typer(
    name="termux-py",
    no_args_is_help=True,
    help="Call Termux:API commands from Python and run small device recipes.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route library logs through Rich on stderr."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _run(coro: Awaitable[Any]) -> Any:
    """Run a coroutine, turning library errors into exit code 1."""

    try:
        return asyncio.run(coro)
    except TermuxError as exc:
        logging.getLogger(__name__).debug("Invocation failed: %s", exc.to_dict())
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (overrides TERMUX_API_LOG_LEVEL)."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


# Everything after COMMAND belongs to the Termux command, so options are not
# parsed past the first positional argument.
@app.command(context_settings={"allow_interspersed_args": False})
def call(
    command: str = typer.Argument(..., help="Capability name without prefix, e.g. battery-status."),
    args: Optional[list[str]] = typer.Argument(None, help="Argument tokens passed verbatim."),
    json_output: bool = typer.Option(False, "--json", help="Decode stdout as JSON."),
    stdin: Optional[str] = typer.Option(None, "--stdin", help="Text written to the command's stdin."),
    output: Optional[Path] = typer.Option(None, "--output", help="Also save the result as JSON."),
) -> None:
    """Run any Termux:API command once and print its result.

    Options go before COMMAND: `termux-py call --json call-log -l 5 -o 10`.
    """

    invocation = Invocation.of(command, args or (), input_text=stdin, json_output=json_output)
    result = _run(execute(invocation))

    if json_output:
        typer.echo(dumps_result(result))
    elif result:
        typer.echo(result)

    if output is not None:
        saved = export_result_json(value=result, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {saved}")


@app.command()
def battery(
    json_output: bool = typer.Option(False, "--json", help="Print the raw status as JSON."),
) -> None:
    """Show the battery status."""

    status = _run(get_battery_status())
    if json_output:
        typer.echo(dumps_result(status))
        return
    print_banner(_console)
    _console.print(build_battery_table(status))


@app.command("notify-low-battery")
def notify_low_battery(
    threshold: int = typer.Option(20, "--threshold", "-t", min=1, max=100, help="Percentage below which to notify."),
) -> None:
    """Post a notification when the battery is low and unplugged."""

    result = _run(notify_if_low_battery(threshold=threshold))
    _console.print(build_recipe_panel(result))


@app.command("speak-battery")
def speak_battery() -> None:
    """Read the battery percentage aloud."""

    result = _run(speak_battery_status())
    _console.print(build_recipe_panel(result))


@app.command("photo-share")
def photo_share(
    path: Path = typer.Argument(..., help="Where to save the photo."),
    camera: Optional[str] = typer.Option(None, "--camera", "-c", help="Camera id (see termux-camera-info)."),
    title: str = typer.Option("Check out this photo!", "--title", help="Share chooser title."),
) -> None:
    """Take a photo and open the share chooser for it."""

    result = _run(take_and_share_photo(file_path=str(path), camera_id=camera, title=title))
    _console.print(build_recipe_panel(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
