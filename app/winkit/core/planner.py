"""Selection-to-RunPlan builder.

Turns the user's selection into the ordered plan executed by the
orchestrator. The builder is a pure function of its inputs.
"""

from collections.abc import Iterable

from winkit.core.config import DEFAULT_NVIDIA_PACKAGE_ID
from winkit.core.gpu import driver_entry
from winkit.models.catalog import Catalog
from winkit.models.hardware import GpuVendor
from winkit.models.plan import PlanStep, RunPlan, StepType

UPDATE_ALL_LABEL = "Upgrade all packages"


class UnknownSelectionError(ValueError):
    """Raised when a selection contains keys the catalog does not know."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = keys
        super().__init__(f"Unknown application(s): {', '.join(keys)}")


def build_run_plan(
    catalog: Catalog,
    selection: Iterable[str],
    *,
    update_all: bool = False,
    gpu_vendor: GpuVendor | None = None,
    nvidia_package_id: str = DEFAULT_NVIDIA_PACKAGE_ID,
) -> RunPlan:
    """Build the run plan for a selection.

    Steps are ordered as follows, independent of the selection's order:

    1. Selected catalog entries, in catalog order.
    2. The update-all step, if requested.
    3. The GPU driver step, if the detected vendor is NVIDIA.

    Args:
        catalog: Catalog the selection refers to.
        selection: Selected catalog keys. May be empty.
        update_all: Append the update-all step.
        gpu_vendor: Detected GPU vendor, or None to skip the GPU advisory.
        nvidia_package_id: Driver utility installed for NVIDIA GPUs.

    Returns:
        RunPlan with a fixed number of steps.

    Raises:
        UnknownSelectionError: If the selection contains unknown keys.
    """
    selected = frozenset(selection)
    unknown = catalog.unknown_keys(selected)
    if unknown:
        raise UnknownSelectionError(unknown)

    steps: list[PlanStep] = [
        PlanStep(step_type=StepType.PACKAGE, label=entry.display_name, entry=entry)
        for entry in catalog
        if entry.key in selected
    ]

    if update_all:
        steps.append(PlanStep(step_type=StepType.UPDATE_ALL, label=UPDATE_ALL_LABEL))

    if gpu_vendor == GpuVendor.NVIDIA:
        entry = driver_entry(nvidia_package_id)
        steps.append(PlanStep(step_type=StepType.GPU_DRIVER, label=entry.display_name, entry=entry))

    return RunPlan(steps=tuple(steps), gpu_vendor=gpu_vendor)
