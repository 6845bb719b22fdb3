"""GPU vendor detection and driver advisory.

Detects the GPU vendor from display adapter names and decides what to do
about vendor drivers:

- NVIDIA: the driver utility is installed as a regular plan step.
- AMD: the driver support page is opened in the default browser.
- Unknown: nothing is done.
"""

import logging
import re
from collections.abc import Callable, Iterable

import typer

from winkit.core.config import DEFAULT_AMD_SUPPORT_URL
from winkit.models.catalog import CatalogEntry
from winkit.models.event import StepEvent, StepKind
from winkit.models.hardware import GpuVendor
from winkit.models.plan import PlanStep, StepType

logger = logging.getLogger(__name__)

# Adapters of virtual machines and remote sessions that say nothing about
# the physical GPU.
VIRTUAL_ADAPTER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"remote display",
        r"microsoft basic (display|render)",
        r"hyper-v",
        r"vmware",
        r"virtualbox",
        r"parsec",
        r"citrix",
        r"virtual (display|monitor)",
    )
)

# Checked in this order for every adapter name; first hit wins.
VENDOR_MARKERS: tuple[tuple[GpuVendor, str], ...] = (
    (GpuVendor.NVIDIA, "nvidia"),
    (GpuVendor.AMD, "amd"),
)

ADVISORY_STEP = PlanStep(step_type=StepType.GPU_ADVISORY, label="GPU driver")


def is_virtual_adapter(name: str) -> bool:
    """Check if an adapter name belongs to a virtual or remote display."""
    return any(p.search(name) for p in VIRTUAL_ADAPTER_PATTERNS)


def detect_vendor(adapter_names: Iterable[str]) -> GpuVendor:
    """Detect the GPU vendor from display adapter names.

    Virtual and remote adapters are skipped. For each remaining name, in
    order, NVIDIA is checked before AMD (case-insensitive substring).

    Args:
        adapter_names: Display adapter names as reported by the host.

    Returns:
        The first vendor found, or GpuVendor.UNKNOWN.

    Example:
        >>> detect_vendor(["AMD Radeon RX 6800", "Microsoft Remote Display Adapter"])
        <GpuVendor.AMD: 'amd'>
    """
    for name in adapter_names:
        if is_virtual_adapter(name):
            logger.debug("Ignoring virtual adapter: %s", name)
            continue
        lowered = name.lower()
        for vendor, marker in VENDOR_MARKERS:
            if marker in lowered:
                return vendor
    return GpuVendor.UNKNOWN


def driver_entry(package_id: str) -> CatalogEntry:
    """Build the catalog entry for the NVIDIA driver utility."""
    return CatalogEntry(key="nvidia-driver", package_id=package_id, display_name="NVIDIA driver utility")


class GpuAdvisor:
    """Carries out the advisory for vendors without a silent driver install.

    Attributes:
        amd_support_url: Page opened for AMD GPUs.
    """

    def __init__(
        self,
        amd_support_url: str = DEFAULT_AMD_SUPPORT_URL,
        opener: Callable[[str], int] = typer.launch,
    ) -> None:
        """Initialize the advisor.

        Args:
            amd_support_url: Page opened for AMD GPUs.
            opener: Callable that opens a URL in the default browser and
                returns its exit code.
        """
        self.amd_support_url = amd_support_url
        self._opener = opener

    def advise(self, vendor: GpuVendor) -> StepEvent | None:
        """Run the advisory for a detected vendor.

        Args:
            vendor: Detected GPU vendor.

        Returns:
            An INFO event, or None for NVIDIA (handled by a plan step).
        """
        if vendor == GpuVendor.NVIDIA:
            return None

        if vendor == GpuVendor.AMD:
            try:
                code: int | None = self._opener(self.amd_support_url)
            except OSError as e:
                logger.warning("Could not open %s: %s", self.amd_support_url, e)
                code = None
            if code != 0:
                if code is not None:
                    logger.warning("Opening %s exited with %s", self.amd_support_url, code)
                return StepEvent(
                    kind=StepKind.INFO,
                    step=ADVISORY_STEP,
                    message=f"AMD GPU detected. Download drivers from {self.amd_support_url}",
                )
            return StepEvent(
                kind=StepKind.INFO,
                step=ADVISORY_STEP,
                message=f"AMD GPU detected. Opened driver support page {self.amd_support_url}",
            )

        return StepEvent(
            kind=StepKind.INFO,
            step=ADVISORY_STEP,
            message="No NVIDIA or AMD GPU detected. No action taken",
        )
