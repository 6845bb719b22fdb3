"""Abstract base class for package operators.

This module defines the Operator interface for package managers that
winkit drives.
"""

from abc import ABC, abstractmethod

from winkit.utils.shell import CommandResult


class Operator(ABC):
    """Abstract base class for package operators.

    Operators run one package manager command at a time and block until it
    exits. They report the raw command result; deciding what a result means
    for a run is left to the orchestrator.

    Attributes:
        dry_run: If True, only log commands without executing them.

    Example:
        >>> operator = WingetOperator(dry_run=True)
        >>> if operator.is_available():
        ...     result = operator.install("Google.Chrome")
        ...     print(result.returncode)
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only log commands without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the package manager name for messages."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def install(self, package_id: str) -> CommandResult:
        """Silently install a single package by exact identifier.

        Args:
            package_id: Exact package identifier.

        Returns:
            CommandResult of the install command.

        Raises:
            OSError: If the command cannot be started.
        """

    @abstractmethod
    def upgrade_all(self) -> CommandResult:
        """Silently upgrade every installed package.

        Returns:
            CommandResult of the upgrade command.

        Raises:
            OSError: If the command cannot be started.
        """
