"""Rich components for the CLI.

Why separate components:
- Keeps command logic apart from presentation details.
- Lets several commands reuse the same tables and panels.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from termux_api.core.domain.models import BatteryStatus
from termux_api.core.errors import TermuxError
from termux_api.core.services.recipes import RecipeResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive commands only, never with --json)."""

    title = Text("termux-api-py", style="bold cyan")
    subtitle = Text("Android device capabilities from Python", style="dim")
    console.print(Panel(Text.assemble(title, "\n", subtitle), border_style="cyan", padding=(0, 2)))


def build_battery_table(status: BatteryStatus) -> Table:
    table = Table(title="Battery")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    rows = (
        ("Percentage", f"{status.percentage}%" if status.percentage is not None else "unknown"),
        ("Status", status.status),
        ("Plugged", status.plugged),
        ("Health", status.health),
        ("Temperature", f"{status.temperature:.1f} °C" if status.temperature is not None else None),
        ("Voltage", f"{status.voltage} mV" if status.voltage is not None else None),
        ("Current", f"{status.current} µA" if status.current is not None else None),
    )
    for label, value in rows:
        if value is not None:
            table.add_row(label, str(value))
    return table


def build_recipe_panel(result: RecipeResult) -> Panel:
    body = Text(result.message)
    if result.steps:
        body.append("\nSteps: " + " → ".join(result.steps), style="dim")
    style = "green" if result.performed else "yellow"
    return Panel(body, border_style=style)


def build_error_panel(error: TermuxError) -> Panel:
    """Panel for a failed invocation: message plus the error kind."""

    title = Text(error.error_code, style="bold red")
    return Panel(Text(error.message), title=title, border_style="red")
