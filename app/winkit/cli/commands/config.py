"""Config command implementation.

Shows and initializes the winkit settings file.
"""

from typing import Annotated

import typer
from rich.table import Table

from winkit.cli.types import require_settings
from winkit.core.config import ConfigError, Settings, save_settings
from winkit.core.paths import get_config_path
from winkit.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings."""
    settings = require_settings()
    path = get_config_path()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)
    source = str(path) if path.exists() else "defaults (no config file)"
    console.print(f"\n[muted]Source: {source}[/]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config file already exists: {path}")
        print_info("Use --force to overwrite it with defaults.")
        raise typer.Exit(code=0)

    try:
        saved = save_settings(Settings(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def path() -> None:
    """Print the config file location."""
    console.print(str(get_config_path()), highlight=False, soft_wrap=True)
