"""CLI entry point (Typer).

Invoked without a subcommand it runs the full publish; the process exits
with the status of the first failing step, or 0.

The launching script may pass its own directory as the Click context object;
it anchors the project root. The installed console script passes nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import typer
from rich.console import Console
from rich.markup import escape

from adapters.subprocess_runner import SubprocessRunner
from cli.doctor import doctor
from cli.settings_loader import load_settings
from cli.ui_components import build_steps_table, format_step_start, print_banner
from core.domain.errors import StepFailedError
from core.domain.models import StepName, StepRecord
from core.logging_setup import configure_logging
from core.services.publisher import PublishHooks, Publisher

app = typer.Typer(
    help="Rebuild the crate documentation and force-publish it to gh-pages.",
    add_completion=False,
)
app.command(name="doctor")(doctor)

_console = Console()


def publish_docs(anchor: Path | None = None) -> None:
    settings = load_settings(_console)
    configure_logging(settings.log_level)
    print_banner(_console, settings)

    finished: list[StepRecord] = []

    def _on_start(name: StepName, argv: Sequence[str]) -> None:
        _console.print(format_step_start(name, argv))

    publisher = Publisher(
        runner=SubprocessRunner(),
        settings=settings,
        hooks=PublishHooks(step_start=_on_start, step_done=finished.append),
        anchor=anchor,
    )

    try:
        publisher.run()
    except StepFailedError as exc:
        _console.print(build_steps_table(finished))
        _console.print(f"[bold red]{exc.step.value} failed[/bold red] (exit status {exc.returncode})")
        raise typer.Exit(code=exc.returncode)
    except FileNotFoundError as exc:
        _console.print(f"[bold red]Cannot resolve base directory:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    _console.print(build_steps_table(finished))
    _console.print(f"[green]Published to[/green] {settings.remote_url} ({settings.remote_branch})")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Rebuild the crate documentation and force-publish it to gh-pages."""

    if ctx.invoked_subcommand is None:
        publish_docs(anchor=ctx.obj)


def run(base_dir: Path | None = None) -> None:
    app(obj=base_dir)
