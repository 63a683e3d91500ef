"""Settings loading shared by every CLI command."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from core.config import PublishSettings

# Exit status for an invalid configuration (Click's usage-error code).
CONFIG_ERROR_EXIT = 2


def load_settings(console: Console) -> PublishSettings:
    """Build `PublishSettings`, turning validation errors into exit code 2."""

    try:
        return PublishSettings()
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=CONFIG_ERROR_EXIT)
