"""Abstract base class for availability probers.

This module defines the Prober interface used by the orchestrator to decide
whether a package needs installing, and the output matching strategies a
prober can use.
"""

import re
from abc import ABC, abstractmethod


class MatchStrategy(ABC):
    """Decides whether probe output reports a package identifier.

    Keeping the text matching behind this interface lets the rule change
    with the package manager's output format without touching the prober
    or the orchestrator.
    """

    @abstractmethod
    def matches(self, output: str, package_id: str) -> bool:
        """Check if the output contains a hit row for package_id."""


class LineStartMatch(MatchStrategy):
    """Hit rows start with the identifier followed by whitespace."""

    def matches(self, output: str, package_id: str) -> bool:
        pattern = re.compile(rf"^{re.escape(package_id)}\s", re.MULTILINE)
        return pattern.search(output) is not None


class ColumnMatch(MatchStrategy):
    """The identifier appears as a whitespace-delimited column on any row.

    Tolerates tabular output where the id is not the first column
    (e.g. 'Name  Id  Version').
    """

    def matches(self, output: str, package_id: str) -> bool:
        pattern = re.compile(rf"(?:^|\s){re.escape(package_id)}(?:\s|$)", re.MULTILINE)
        return pattern.search(output) is not None


MATCH_STRATEGIES: dict[str, type[MatchStrategy]] = {
    "line-start": LineStartMatch,
    "column": ColumnMatch,
}


class Prober(ABC):
    """Abstract base class for availability probers.

    A prober answers a single question: is this package already installed?
    Anything short of a clear "yes" is reported as not installed, so a
    failed query leads to an install attempt rather than a skipped item.

    Example:
        >>> prober = WingetProber()
        >>> if not prober.is_installed("Google.Chrome"):
        ...     print("needs install")
    """

    @abstractmethod
    def is_installed(self, package_id: str) -> bool:
        """Check if a package is installed.

        Args:
            package_id: Exact package manager identifier.

        Returns:
            True only if the package manager confirms the package.
        """
