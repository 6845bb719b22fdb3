"""Unit tests for run plan and event models."""

import pytest
from winkit.models.catalog import CatalogEntry
from winkit.models.event import StepEvent, StepKind
from winkit.models.hardware import GpuVendor
from winkit.models.plan import PlanStep, RunPlan, StepType

CHROME = CatalogEntry("chrome", "Google.Chrome", "Google Chrome")


class TestPlanStep:
    """Tests for PlanStep validation."""

    def test_package_step_requires_entry(self) -> None:
        """PACKAGE step without entry raises ValueError."""
        with pytest.raises(ValueError, match="requires a catalog entry"):
            PlanStep(step_type=StepType.PACKAGE, label="Chrome")

    def test_gpu_driver_step_requires_entry(self) -> None:
        """GPU_DRIVER step without entry raises ValueError."""
        with pytest.raises(ValueError, match="requires a catalog entry"):
            PlanStep(step_type=StepType.GPU_DRIVER, label="Driver")

    def test_update_all_rejects_entry(self) -> None:
        """UPDATE_ALL step with entry raises ValueError."""
        with pytest.raises(ValueError, match="does not take a catalog entry"):
            PlanStep(step_type=StepType.UPDATE_ALL, label="Upgrade", entry=CHROME)

    def test_is_install(self) -> None:
        """Package and driver steps are install steps."""
        assert PlanStep(StepType.PACKAGE, "Chrome", CHROME).is_install is True
        assert PlanStep(StepType.GPU_DRIVER, "Driver", CHROME).is_install is True
        assert PlanStep(StepType.UPDATE_ALL, "Upgrade").is_install is False
        assert PlanStep(StepType.GPU_ADVISORY, "GPU").is_install is False


class TestRunPlan:
    """Tests for RunPlan."""

    def test_length_and_iteration(self) -> None:
        """len() counts steps; iteration yields them in order."""
        steps = (
            PlanStep(StepType.PACKAGE, "Chrome", CHROME),
            PlanStep(StepType.UPDATE_ALL, "Upgrade"),
        )
        plan = RunPlan(steps=steps)
        assert len(plan) == 2
        assert list(plan) == list(steps)

    def test_is_empty(self) -> None:
        """A plan without steps or advisory is empty."""
        assert RunPlan().is_empty is True
        assert RunPlan(gpu_vendor=GpuVendor.UNKNOWN).is_empty is False
        assert RunPlan(steps=(PlanStep(StepType.UPDATE_ALL, "Upgrade"),)).is_empty is False


class TestStepEvent:
    """Tests for StepEvent."""

    def test_entry_comes_from_step(self) -> None:
        """entry property returns the step's catalog entry."""
        event = StepEvent(kind=StepKind.STARTED, step=PlanStep(StepType.PACKAGE, "Chrome", CHROME))
        assert event.entry is CHROME

    @pytest.mark.parametrize(
        ("kind", "terminal"),
        [
            (StepKind.STARTED, False),
            (StepKind.ALREADY_INSTALLED, True),
            (StepKind.SUCCEEDED, True),
            (StepKind.FAILED, True),
            (StepKind.INFO, False),
        ],
    )
    def test_is_terminal(self, kind: StepKind, terminal: bool) -> None:
        """Only outcome kinds end a step."""
        event = StepEvent(kind=kind, step=PlanStep(StepType.UPDATE_ALL, "Upgrade"))
        assert event.is_terminal is terminal
