"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil

import typer
from rich.console import Console
from rich.table import Table

from termux_api.adapters import WRAPPED_COMMANDS
from termux_api.adapters.battery import get_battery_status
from termux_api.core.config import AppSettings, get_user_env_file, write_user_env_vars
from termux_api.core.errors import TermuxError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def find_missing_commands(settings: AppSettings) -> list[str]:
    """Wrapped commands whose executable cannot be resolved."""

    return [
        command
        for command in WRAPPED_COMMANDS
        if shutil.which(settings.resolve_executable(command)) is None
    ]


async def _probe(settings: AppSettings) -> tuple[bool, str]:
    try:
        status = await get_battery_status(settings=settings)
    except TermuxError as exc:
        return False, exc.message.splitlines()[0]
    return True, f"battery at {status.percentage}%"


@app.command()
def run(
    probe: bool = typer.Option(
        False,
        "--probe",
        help="Also call termux-battery-status to check the Termux:API app answers.",
    ),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="termux-api-py Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Command prefix", "OK", settings.command_prefix)
    table.add_row("Executable dir", "OK", str(settings.bin_dir) if settings.bin_dir else "PATH lookup")
    table.add_row("Encoding", "OK", settings.encoding)

    # Executables
    missing = find_missing_commands(settings)
    found = len(WRAPPED_COMMANDS) - len(missing)
    if not missing:
        table.add_row("Executables", "OK", f"{found}/{len(WRAPPED_COMMANDS)} found")
    else:
        table.add_row(
            "Executables",
            "FAIL" if found == 0 else "PARTIAL",
            f"{found}/{len(WRAPPED_COMMANDS)} found; missing: {', '.join(missing)}",
        )

    ok_probe = True
    if probe:
        ok_probe, detail_probe = asyncio.run(_probe(settings))
        table.add_row("Termux:API app", "OK" if ok_probe else "FAIL", detail_probe)

    _console.print(table)

    if missing and found == 0:
        _console.print(
            "\n[yellow]Note:[/yellow] Install the commands with `pkg install termux-api` "
            "and the Termux:API Android app."
        )
    if not ok_probe:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    prefix = typer.prompt("Command prefix", default=settings.command_prefix, show_default=True).strip()
    bin_dir = typer.prompt(
        "Executable directory (empty for PATH lookup)",
        default=str(settings.bin_dir or ""),
        show_default=False,
    ).strip()

    if not prefix:
        raise typer.BadParameter("prefix is required")

    env_path = write_user_env_vars(
        {
            "TERMUX_API_COMMAND_PREFIX": prefix,
            "TERMUX_API_BIN_DIR": bin_dir,
        },
        env_path=get_user_env_file(),
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
