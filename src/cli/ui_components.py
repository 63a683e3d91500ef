"""UI components for the CLI (Rich).

Why separate components:
- Keeps command bodies free of presentation details.
- The same step table serves both the success and the failure path.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import PublishSettings
from core.domain.models import StepName, StepRecord


def print_banner(console: Console, settings: PublishSettings) -> None:
    """Print the start-up banner with the publish target."""

    title = Text("xyz-docs", style="bold cyan")
    subtitle = Text(
        f"cargo doc -> {settings.remote_name}/{settings.remote_branch} (force)",
        style="dim",
    )
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_step_start(name: StepName, argv: Sequence[str]) -> Text:
    line = Text()
    line.append(f"[{name.value}] ", style="bold cyan")
    line.append(" ".join(argv), style="white")
    return line


def build_steps_table(steps: Iterable[StepRecord]) -> Table:
    """Summary table of the commands that ran."""

    table = Table(title="Publish steps")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Command", style="white")
    table.add_column("Exit", justify="right")
    for step in steps:
        status = Text(str(step.returncode), style="green" if step.ok else "bold red")
        table.add_row(step.name.value, " ".join(step.argv), status)
    return table
