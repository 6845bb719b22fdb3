"""Install orchestration.

Runs a RunPlan step by step: probe, install only what is missing, upgrade
everything if requested, then the GPU advisory. Results are yielded as a
stream of StepUpdate items so the caller decides how to render them.

Steps run strictly one after another and each command blocks until its
process exits. A failed step never aborts the plan.
"""

import logging
from collections.abc import Iterator

from winkit.core.gpu import GpuAdvisor
from winkit.models.event import StepEvent, StepKind, StepUpdate
from winkit.models.plan import PlanStep, RunPlan, StepType
from winkit.operators.base import Operator
from winkit.probers.base import Prober
from winkit.utils.shell import CommandResult, format_exit_code

logger = logging.getLogger(__name__)

# HRESULTs winget reports for common, recognisable failures.
WINGET_ERRORS: dict[int, str] = {
    0x8A150014: "No package found matching the identifier",
    0x8A150015: "Multiple packages found matching the identifier",
    0x8A15002B: "No applicable upgrade found",
    0x8A150061: "Package is already installed",
}


class OrchestrationError(Exception):
    """Base exception for errors that abort a whole run."""


class PrerequisiteMissingError(OrchestrationError):
    """Raised when the package manager is not available."""


def describe_exit_code(code: int) -> str:
    """Return a human-readable description of a failing exit code."""
    known = WINGET_ERRORS.get(code & 0xFFFFFFFF)
    formatted = format_exit_code(code)
    if known:
        return f"{known} (exit code {formatted})"
    return f"Exit code {formatted}"


class Orchestrator:
    """Executes run plans against a package manager.

    Attributes:
        prober: Decides whether a package is already installed.
        operator: Runs install and upgrade commands.
        advisor: GPU advisory for vendors without a driver install step.

    Example:
        >>> orchestrator = Orchestrator(WingetProber(), WingetOperator())
        >>> for update in orchestrator.run_plan(plan):
        ...     print(update.event.kind, update.percent)
    """

    def __init__(
        self,
        prober: Prober,
        operator: Operator,
        advisor: GpuAdvisor | None = None,
    ) -> None:
        self.prober = prober
        self.operator = operator
        self.advisor = advisor or GpuAdvisor()

    def run_plan(self, plan: RunPlan) -> Iterator[StepUpdate]:
        """Execute a plan and yield its events in order.

        Every step yields a STARTED event followed by exactly one terminal
        event (ALREADY_INSTALLED, SUCCEEDED or FAILED). The terminal event
        of step i of n carries i / n * 100 percent. The GPU advisory, if
        any, follows as an INFO event without changing the percentage.

        Args:
            plan: Plan to execute.

        Yields:
            StepUpdate for each event.

        Raises:
            PrerequisiteMissingError: If the package manager is not
                available. Raised before any event is yielded.
        """
        if plan.steps and not self.operator.is_available():
            msg = f"{self.operator.name} is not available on this system"
            raise PrerequisiteMissingError(msg)

        total = len(plan)
        percent = 0.0
        logger.info("Starting run with %d step(s)", total)

        for index, step in enumerate(plan, start=1):
            yield StepUpdate(event=StepEvent(kind=StepKind.STARTED, step=step), percent=percent)

            if step.step_type == StepType.UPDATE_ALL:
                event = self.update_all(step)
            else:
                event = self.install_step(step)

            percent = index / total * 100
            yield StepUpdate(event=event, percent=percent)

        if plan.gpu_vendor is not None:
            advisory = self.advisor.advise(plan.gpu_vendor)
            if advisory is not None:
                yield StepUpdate(event=advisory, percent=percent)

    def install_step(self, step: PlanStep) -> StepEvent:
        """Probe and, if missing, install the package of a step.

        Args:
            step: A PACKAGE or GPU_DRIVER step.

        Returns:
            The terminal event of the step.
        """
        entry = step.entry
        if entry is None:
            msg = f"{step.step_type.value} step has no package to install"
            raise ValueError(msg)

        if self.prober.is_installed(entry.package_id):
            logger.info("%s is already installed", entry.package_id)
            return StepEvent(kind=StepKind.ALREADY_INSTALLED, step=step)

        try:
            result = self.operator.install(entry.package_id)
        except OSError as e:
            logger.warning("Install of %s could not run: %s", entry.package_id, e)
            return StepEvent(kind=StepKind.FAILED, step=step, message=str(e))

        return self._result_event(step, result)

    def update_all(self, step: PlanStep) -> StepEvent:
        """Run the bulk upgrade command.

        Args:
            step: The UPDATE_ALL step.

        Returns:
            SUCCEEDED on exit code 0, FAILED otherwise.
        """
        try:
            result = self.operator.upgrade_all()
        except OSError as e:
            logger.warning("Upgrade could not run: %s", e)
            return StepEvent(kind=StepKind.FAILED, step=step, message=str(e))

        return self._result_event(step, result)

    def _result_event(self, step: PlanStep, result: CommandResult) -> StepEvent:
        if result.success:
            return StepEvent(kind=StepKind.SUCCEEDED, step=step, exit_code=0)

        logger.warning("%s failed with exit code %d", step.label, result.returncode)
        return StepEvent(
            kind=StepKind.FAILED,
            step=step,
            exit_code=result.returncode,
            message=describe_exit_code(result.returncode),
        )
