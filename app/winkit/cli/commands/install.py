"""Install command implementation.

Installs the selected catalog applications, optionally upgrades every
installed package, and runs the GPU driver advisory.
"""

from typing import Annotated

import typer

from winkit.cli.display import create_catalog_table, create_plan_table
from winkit.cli.types import (
    create_orchestrator,
    execute_plan,
    require_elevation,
    require_settings,
)
from winkit.core.gpu import detect_vendor
from winkit.core.planner import UnknownSelectionError, build_run_plan
from winkit.models.catalog import DEFAULT_CATALOG, Catalog
from winkit.models.hardware import GpuVendor
from winkit.utils.formatting import console, print_error, print_info, print_success
from winkit.utils.hardware import query_display_adapters

app = typer.Typer(
    invoke_without_command=True,
)


def parse_selection(answer: str, catalog: Catalog) -> set[str]:
    """Translate a checklist answer into catalog keys.

    The answer is a list of catalog numbers (as shown by the catalog table)
    or keys, separated by spaces or commas. Unknown tokens are returned
    unchanged so the plan builder can report them.

    Args:
        answer: Raw user input.
        catalog: Catalog the numbers refer to.

    Returns:
        Selected keys.
    """
    keys = catalog.keys
    selected: set[str] = set()
    for token in answer.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(keys):
            selected.add(keys[int(token) - 1])
        else:
            selected.add(token.lower())
    return selected


def _prompt_selection(catalog: Catalog) -> set[str]:
    """Show the catalog checklist and ask which applications to install."""
    console.print(create_catalog_table(catalog))
    answer: str = typer.prompt(
        "Select applications (numbers or keys, separated by spaces)",
        default="",
        show_default=False,
    )
    return parse_selection(answer, catalog)


def _detect_gpu_vendor() -> GpuVendor:
    vendor = detect_vendor(query_display_adapters())
    print_info(f"Detected GPU vendor: {vendor.value}")
    return vendor


@app.callback(invoke_without_command=True)
def install_apps(
    apps: Annotated[
        list[str] | None,
        typer.Option(
            "--app",
            "-a",
            help="Catalog key to install. Repeat for several applications.",
        ),
    ] = None,
    select_all: Annotated[
        bool,
        typer.Option("--all", help="Select every application in the catalog."),
    ] = False,
    update_all: Annotated[
        bool,
        typer.Option("--update-all", "-u", help="Upgrade all installed packages afterwards."),
    ] = False,
    no_gpu: Annotated[
        bool,
        typer.Option("--no-gpu", help="Skip the GPU driver advisory."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be done without executing."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Install selected applications with winget.

    Without --app or --all, a numbered checklist of the catalog is shown
    and the selection is read interactively.
    """
    catalog = DEFAULT_CATALOG
    settings = require_settings()

    if select_all:
        selection: set[str] = set(catalog.keys)
    elif apps:
        selection = {key.lower() for key in apps}
    else:
        selection = _prompt_selection(catalog)

    gpu_vendor = None if no_gpu or not settings.gpu_advisory else _detect_gpu_vendor()

    try:
        plan = build_run_plan(
            catalog,
            selection,
            update_all=update_all,
            gpu_vendor=gpu_vendor,
            nvidia_package_id=settings.nvidia_driver_package_id,
        )
    except UnknownSelectionError as e:
        print_error(str(e))
        print_info("Run 'winkit catalog' to list available applications.")
        raise typer.Exit(code=1) from e

    if plan.is_empty:
        print_info("Nothing selected. Nothing to do.")
        return

    if plan.steps:
        console.print(create_plan_table(plan, dry_run=dry_run))

    if not dry_run and not yes and plan.steps:
        confirmed = typer.confirm(f"\nProceed with {len(plan)} step(s)?", default=True)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    if plan.steps:
        require_elevation(dry_run)

    summary = execute_plan(plan, create_orchestrator(settings, dry_run=dry_run))

    if summary.has_failures:
        raise typer.Exit(code=1)
    print_success("All steps completed.")
