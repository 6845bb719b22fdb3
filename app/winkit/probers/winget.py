"""winget availability prober.

Asks `winget list` for an exact identifier and matches the output.
"""

import logging
import subprocess

from winkit.probers.base import LineStartMatch, MatchStrategy, Prober
from winkit.utils.shell import run_command

logger = logging.getLogger(__name__)


class WingetProber(Prober):
    """Prober backed by `winget list --id <id> --exact`.

    Attributes:
        executable: winget executable name or path.
        strategy: Output matching strategy.
    """

    def __init__(
        self,
        executable: str = "winget",
        strategy: MatchStrategy | None = None,
    ) -> None:
        """Initialize the prober.

        Args:
            executable: winget executable name or path.
            strategy: Output matching strategy. Defaults to LineStartMatch.
        """
        self.executable = executable
        self.strategy = strategy or LineStartMatch()

    def is_installed(self, package_id: str) -> bool:
        """Check if winget lists the package as installed.

        Query failures of any kind count as not installed.
        """
        args = [
            self.executable,
            "list",
            "--id",
            package_id,
            "--exact",
            "--accept-source-agreements",
            "--disable-interactivity",
        ]
        try:
            result = run_command(args)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Probe for %s could not run: %s", package_id, e)
            return False

        installed = self.strategy.matches(result.output, package_id)
        logger.debug(
            "Probe for %s: exit=%d installed=%s",
            package_id,
            result.returncode,
            installed,
        )
        return installed
