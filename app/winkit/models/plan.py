"""Run plan models.

A RunPlan is the ordered, length-fixed sequence of steps executed by one
install run. Its length is the progress denominator.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from winkit.models.catalog import CatalogEntry
from winkit.models.hardware import GpuVendor


class StepType(Enum):
    """Type of a plan step.

    Attributes:
        PACKAGE: Install a selected catalog entry.
        UPDATE_ALL: Upgrade every installed package.
        GPU_DRIVER: Install the GPU vendor driver utility.
        GPU_ADVISORY: Advisory outcome for GPUs without a silent driver
            install. Not counted as a plan step.
    """

    PACKAGE = "package"
    UPDATE_ALL = "update-all"
    GPU_DRIVER = "gpu-driver"
    GPU_ADVISORY = "gpu-advisory"


@dataclass(frozen=True, slots=True)
class PlanStep:
    """A single step of a run plan.

    Attributes:
        step_type: What the step does.
        label: Human-readable step name used in progress output.
        entry: Catalog entry to install. Required for PACKAGE and
            GPU_DRIVER steps, absent otherwise.
    """

    step_type: StepType
    label: str
    entry: CatalogEntry | None = None

    def __post_init__(self) -> None:
        """Validate that exactly the install steps carry an entry."""
        if self.is_install and self.entry is None:
            msg = f"{self.step_type.value} step requires a catalog entry"
            raise ValueError(msg)
        if not self.is_install and self.entry is not None:
            msg = f"{self.step_type.value} step does not take a catalog entry"
            raise ValueError(msg)

    @property
    def is_install(self) -> bool:
        """Check if this step installs a single package."""
        return self.step_type in (StepType.PACKAGE, StepType.GPU_DRIVER)


@dataclass(frozen=True, slots=True)
class RunPlan:
    """Ordered steps of one install run.

    Attributes:
        steps: Steps in execution order.
        gpu_vendor: Detected GPU vendor, or None when the GPU advisory is
            disabled for this run.
    """

    steps: tuple[PlanStep, ...] = field(default=())
    gpu_vendor: GpuVendor | None = None

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[PlanStep]:
        return iter(self.steps)

    @property
    def is_empty(self) -> bool:
        """Check if the plan has neither steps nor a GPU advisory."""
        return not self.steps and self.gpu_vendor is None
