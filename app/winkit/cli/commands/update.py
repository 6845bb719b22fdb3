"""Update command implementation.

Upgrades every installed package with a single bulk winget command.
"""

from typing import Annotated

import typer

from winkit.cli.types import (
    create_orchestrator,
    execute_plan,
    require_elevation,
    require_settings,
)
from winkit.core.planner import build_run_plan
from winkit.models.catalog import DEFAULT_CATALOG
from winkit.utils.formatting import print_success

app = typer.Typer(
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def update_packages(
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show the command without executing it."),
    ] = False,
) -> None:
    """Run `winget upgrade --all` silently."""
    settings = require_settings()
    plan = build_run_plan(DEFAULT_CATALOG, (), update_all=True)

    require_elevation(dry_run)

    summary = execute_plan(plan, create_orchestrator(settings, dry_run=dry_run))

    if summary.has_failures:
        raise typer.Exit(code=1)
    print_success("All packages are up to date.")
