"""winget package operator implementation.

Executes silent installs and bulk upgrades using the winget CLI.
"""

import logging

from winkit.operators.base import Operator
from winkit.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Flags shared by every unattended winget invocation
SILENT_FLAGS: tuple[str, ...] = (
    "--silent",
    "--accept-source-agreements",
    "--accept-package-agreements",
    "--disable-interactivity",
)


class WingetOperator(Operator):
    """Operator for the Windows Package Manager.

    Commands run without a timeout: installers can legitimately take a long
    time, and winget serializes access to its own state.

    Attributes:
        executable: winget executable name or path.
        dry_run: If True, commands are logged and reported as successful.
    """

    def __init__(self, executable: str = "winget", dry_run: bool = False) -> None:
        super().__init__(dry_run=dry_run)
        self.executable = executable

    @property
    def name(self) -> str:
        """Return 'winget'."""
        return "winget"

    def is_available(self) -> bool:
        """Check if the winget executable is on PATH."""
        return command_exists(self.executable)

    def install(self, package_id: str) -> CommandResult:
        """Install a package using `winget install --id <id> --exact`."""
        args = [self.executable, "install", "--id", package_id, "--exact", *SILENT_FLAGS]
        return self._execute(args)

    def upgrade_all(self) -> CommandResult:
        """Upgrade all packages using `winget upgrade --all`."""
        args = [self.executable, "upgrade", "--all", *SILENT_FLAGS]
        return self._execute(args)

    def _execute(self, args: list[str]) -> CommandResult:
        logger.info("Executing: %s (dry_run=%s)", " ".join(args), self.dry_run)

        if self.dry_run:
            return CommandResult(stdout="", stderr="", returncode=0)

        result = run_command(args, timeout=None)
        logger.debug("%s exited with %d", args[1], result.returncode)
        return result
