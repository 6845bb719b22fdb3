"""Shared helpers for CLI commands.

Builds the orchestrator from settings and drives a run plan through the
progress reporter. Used by the `install` and `update` commands.
"""

import logging

import typer

from winkit.cli.reporter import ProgressReporter, RunSummary
from winkit.core.config import ConfigError, Settings, load_settings
from winkit.core.gpu import GpuAdvisor
from winkit.core.orchestrator import Orchestrator, PrerequisiteMissingError
from winkit.models.plan import RunPlan
from winkit.operators.winget import WingetOperator
from winkit.probers.base import MATCH_STRATEGIES
from winkit.probers.winget import WingetProber
from winkit.utils.elevation import is_elevated
from winkit.utils.formatting import console, print_error

logger = logging.getLogger(__name__)


def require_settings() -> Settings:
    """Load settings or exit with an error message.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    try:
        return load_settings()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def require_elevation(dry_run: bool) -> None:
    """Exit unless the process is elevated. Dry runs need no privileges.

    Raises:
        typer.Exit: If the process is not elevated.
    """
    if dry_run or is_elevated():
        return
    print_error(
        "Administrator privileges are required. "
        "Re-run winkit from an elevated terminal, or use --dry-run."
    )
    raise typer.Exit(code=1)


def create_orchestrator(settings: Settings, dry_run: bool = False) -> Orchestrator:
    """Create an orchestrator configured from settings.

    Args:
        settings: Effective settings.
        dry_run: If True, commands are logged but not executed.

    Returns:
        Orchestrator using winget for probing and installing.
    """
    strategy = MATCH_STRATEGIES[settings.probe_match]()
    return Orchestrator(
        prober=WingetProber(executable=settings.winget_executable, strategy=strategy),
        operator=WingetOperator(executable=settings.winget_executable, dry_run=dry_run),
        advisor=GpuAdvisor(amd_support_url=settings.amd_support_url),
    )


def execute_plan(plan: RunPlan, orchestrator: Orchestrator) -> RunSummary:
    """Run a plan and render its progress.

    Args:
        plan: Plan to execute.
        orchestrator: Orchestrator to run it with.

    Returns:
        Summary of the run.

    Raises:
        typer.Exit: If the package manager is missing.
    """
    try:
        with ProgressReporter(console) as reporter:
            for update in orchestrator.run_plan(plan):
                reporter.render(update.event, update.percent)
            summary = reporter.finish()
    except PrerequisiteMissingError as e:
        print_error(f"{e}. Install 'App Installer' from the Microsoft Store and try again.")
        raise typer.Exit(code=1) from e

    logger.info(
        "Run finished: %d succeeded, %d already installed, %d failed",
        summary.succeeded,
        summary.already_installed,
        summary.failed,
    )
    return summary
