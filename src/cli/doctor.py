"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.settings_loader import load_settings
from core.paths import resolve_base_dir

_console = Console()


def _check_tool(name: str) -> tuple[bool, str]:
    path = shutil.which(name)
    if path is None:
        return False, "not found on PATH"
    return True, path


def doctor(ctx: typer.Context) -> None:
    """Check the publish prerequisites without running anything."""

    settings = load_settings(_console)

    table = Table(title="xyz-docs Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_doc, detail_doc = _check_tool(settings.doc_tool)
    table.add_row(settings.doc_tool, "OK" if ok_doc else "FAIL", detail_doc)
    ok_git, detail_git = _check_tool(settings.git_executable)
    table.add_row(settings.git_executable, "OK" if ok_git else "FAIL", detail_git)

    try:
        base_dir = resolve_base_dir(settings.base_dir, anchor=ctx.obj)
    except FileNotFoundError as exc:
        table.add_row("Base dir", "FAIL", escape(str(exc)))
        _console.print(table)
        raise typer.Exit(code=1)

    output_dir = base_dir / settings.output_subdir
    table.add_row("Base dir", "OK", str(base_dir))
    if output_dir.is_dir():
        table.add_row("Output dir", "OK", str(output_dir))
    else:
        table.add_row("Output dir", "PENDING", f"{output_dir} (created by the build)")

    table.add_row("Remote", "OK", f"{settings.remote_name} -> {settings.remote_url}")
    table.add_row("Branch", "OK", f"{settings.remote_branch} (force-push)")
    table.add_row("Commit message", "OK", settings.commit_message)

    _console.print(table)

    if not (ok_doc and ok_git):
        _console.print("\n[yellow]Note:[/yellow] install the missing tools before publishing.")
        raise typer.Exit(code=1)
