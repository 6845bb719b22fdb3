"""Progress reporting for install runs.

Renders the orchestrator's event stream as one log line per event plus a
progress bar.
"""

from dataclasses import dataclass
from types import TracebackType

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskID, TaskProgressColumn, TextColumn

from winkit.models.event import StepEvent, StepKind
from winkit.models.plan import StepType

# (icon, style) per event kind
_KIND_STYLES: dict[StepKind, tuple[str, str]] = {
    StepKind.STARTED: ("▶", "started"),
    StepKind.ALREADY_INSTALLED: ("●", "present"),
    StepKind.SUCCEEDED: ("✔", "success"),
    StepKind.FAILED: ("✘", "error"),
    StepKind.INFO: ("i", "info"),
}


@dataclass(slots=True)
class RunSummary:
    """Counts of terminal outcomes of a run."""

    succeeded: int = 0
    already_installed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """Return the number of completed steps."""
        return self.succeeded + self.already_installed + self.failed

    @property
    def has_failures(self) -> bool:
        """Check if any step failed."""
        return self.failed > 0


def describe_event(event: StepEvent) -> str:
    """Return the plain-text log line for an event."""
    label = event.step.label
    is_update = event.step.step_type == StepType.UPDATE_ALL

    if event.kind == StepKind.STARTED:
        return f"{label}..." if is_update else f"Installing {label}..."
    if event.kind == StepKind.ALREADY_INSTALLED:
        return f"{label} is already installed, skipped"
    if event.kind == StepKind.SUCCEEDED:
        return f"{label} completed" if is_update else f"{label} installed successfully"
    if event.kind == StepKind.FAILED:
        return f"{label} failed: {event.message or 'unknown error'}"
    return event.message or label


class ProgressReporter:
    """Sink for StepEvents.

    Lines are rendered in arrival order and never dropped or merged. The
    plain-text lines are also kept in ``lines``.

    Example:
        >>> with ProgressReporter(console) as reporter:
        ...     for update in orchestrator.run_plan(plan):
        ...         reporter.render(update.event, update.percent)
        ...     reporter.finish()
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self.lines: list[str] = []
        self.percent = 0.0
        self.summary = RunSummary()
        self._progress = Progress(
            TextColumn("[bold_header]Progress"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        )
        self._task: TaskID = self._progress.add_task("run", total=100)

    def __enter__(self) -> "ProgressReporter":
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def render(self, event: StepEvent, percent: float) -> None:
        """Render one event and move the progress bar to percent.

        Args:
            event: Event to render.
            percent: Overall progress after the event (0 - 100).

        Raises:
            ValueError: If percent is out of range or lower than before.
        """
        if not 0.0 <= percent <= 100.0:
            msg = f"Percent must be between 0 and 100, got {percent}"
            raise ValueError(msg)
        if percent < self.percent:
            msg = f"Progress cannot go backwards ({self.percent} -> {percent})"
            raise ValueError(msg)

        line = describe_event(event)
        self.lines.append(line)
        self._count(event)

        icon, style = _KIND_STYLES[event.kind]
        self._progress.console.print(f"[{style}]{icon}[/] {escape(line)}", highlight=False)

        self.percent = percent
        self._progress.update(self._task, completed=percent)

    def finish(self) -> RunSummary:
        """Complete the progress bar and print the run summary.

        Returns:
            The run summary.
        """
        self.percent = 100.0
        self._progress.update(self._task, completed=100)

        summary = self.summary
        parts = [f"[success]{summary.succeeded} installed/updated[/success]"]
        if summary.already_installed:
            parts.append(f"[present]{summary.already_installed} already installed[/present]")
        if summary.failed:
            parts.append(f"[error]{summary.failed} failed[/error]")
        self._progress.console.print(f"\nSummary: {', '.join(parts)}")
        return summary

    def _count(self, event: StepEvent) -> None:
        if event.kind == StepKind.SUCCEEDED:
            self.summary.succeeded += 1
        elif event.kind == StepKind.ALREADY_INSTALLED:
            self.summary.already_installed += 1
        elif event.kind == StepKind.FAILED:
            self.summary.failed += 1
