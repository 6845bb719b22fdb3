"""Step event models.

Events are produced by the orchestrator and consumed by the progress
reporter. They are never persisted.
"""

from dataclasses import dataclass
from enum import Enum

from winkit.models.catalog import CatalogEntry
from winkit.models.plan import PlanStep


class StepKind(Enum):
    """Kind of a step event.

    Attributes:
        STARTED: The step began executing.
        ALREADY_INSTALLED: The package was present; nothing was installed.
        SUCCEEDED: The command exited with code 0.
        FAILED: The command exited nonzero or could not be invoked.
        INFO: Informational advisory that does not count as a step.
    """

    STARTED = "started"
    ALREADY_INSTALLED = "already-installed"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    INFO = "info"


TERMINAL_KINDS = frozenset({StepKind.ALREADY_INSTALLED, StepKind.SUCCEEDED, StepKind.FAILED})


@dataclass(frozen=True, slots=True)
class StepEvent:
    """Something that happened to a plan step.

    Attributes:
        kind: Event kind.
        step: The plan step this event belongs to.
        exit_code: Process exit code, when a command ran.
        message: Additional detail (error text, advisory text).
    """

    kind: StepKind
    step: PlanStep
    exit_code: int | None = None
    message: str | None = None

    @property
    def entry(self) -> CatalogEntry | None:
        """Return the catalog entry of the step, if any."""
        return self.step.entry

    @property
    def is_terminal(self) -> bool:
        """Check if this event ends its step."""
        return self.kind in TERMINAL_KINDS


@dataclass(frozen=True, slots=True)
class StepUpdate:
    """One item of the orchestrator's output stream.

    Attributes:
        event: The emitted event.
        percent: Overall progress after this event (0.0 - 100.0).
    """

    event: StepEvent
    percent: float
