"""Host hardware models.

Raw values reported by the host hardware query. Formatting for display is
done by the CLI layer.
"""

from dataclasses import dataclass, field
from enum import Enum


class GpuVendor(Enum):
    """GPU vendor detected from display adapter names."""

    NVIDIA = "nvidia"
    AMD = "amd"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class MemoryModule:
    """A physical memory module.

    Attributes:
        capacity_bytes: Module capacity in bytes.
        speed_mhz: Configured speed in MHz, if reported.
    """

    capacity_bytes: int
    speed_mhz: int | None = None


@dataclass(frozen=True, slots=True)
class VolumeSpace:
    """Free and total space of a logical volume.

    Attributes:
        name: Volume identifier (e.g. 'C:').
        free_bytes: Free space in bytes.
        size_bytes: Total size in bytes, if reported.
    """

    name: str
    free_bytes: int
    size_bytes: int | None = None


@dataclass(frozen=True, slots=True)
class SystemInfo:
    """Snapshot of basic host hardware information."""

    cpu_name: str | None = None
    adapters: tuple[str, ...] = field(default=())
    memory_modules: tuple[MemoryModule, ...] = field(default=())
    volumes: tuple[VolumeSpace, ...] = field(default=())

    @property
    def total_memory_bytes(self) -> int:
        """Return the combined capacity of all memory modules."""
        return sum(m.capacity_bytes for m in self.memory_modules)
