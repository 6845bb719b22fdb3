"""Host hardware queries.

Reads display adapters, processor, memory modules and volume space through
PowerShell CIM queries. Every query degrades to empty data on failure.
"""

import json
import logging
import subprocess
from typing import Any

from winkit.models.hardware import MemoryModule, SystemInfo, VolumeSpace
from winkit.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

POWERSHELL = "powershell"

_ADAPTERS_QUERY = "Get-CimInstance Win32_VideoController | Select-Object -ExpandProperty Name"

_SYSTEM_QUERY = (
    "$cpu = (Get-CimInstance Win32_Processor | Select-Object -First 1).Name; "
    "$mem = @(Get-CimInstance Win32_PhysicalMemory | Select-Object Capacity, Speed); "
    "$gpu = @(Get-CimInstance Win32_VideoController | Select-Object -ExpandProperty Name); "
    "$vol = @(Get-CimInstance Win32_LogicalDisk -Filter 'DriveType=3' "
    "| Select-Object DeviceID, FreeSpace, Size); "
    "@{cpu=$cpu; memory=$mem; adapters=$gpu; volumes=$vol} | ConvertTo-Json -Compress -Depth 3"
)

# CIM queries are quick; a stuck WMI service should not hang the CLI.
_QUERY_TIMEOUT: float = 30.0


def _run_powershell(script: str) -> str | None:
    """Run a PowerShell snippet and return its stdout, or None on failure."""
    if not command_exists(POWERSHELL):
        logger.debug("PowerShell not available, skipping hardware query")
        return None
    try:
        result = run_command(
            [POWERSHELL, "-NoProfile", "-NonInteractive", "-Command", script],
            timeout=_QUERY_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Hardware query failed: %s", e)
        return None
    if not result.success:
        logger.debug("Hardware query exited with %d: %s", result.returncode, result.stderr)
        return None
    return result.stdout


def parse_adapter_names(output: str) -> list[str]:
    """Split adapter query output into non-empty, stripped names."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def query_display_adapters() -> list[str]:
    """Return the names of all display adapters on the host.

    Returns:
        Adapter names in the order the host reports them; empty if the
        query is unavailable or fails.
    """
    output = _run_powershell(_ADAPTERS_QUERY)
    if output is None:
        return []
    return parse_adapter_names(output)


def _as_list(value: Any) -> list[Any]:
    # ConvertTo-Json collapses one-element arrays into a bare object
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _as_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_system_info(output: str) -> SystemInfo:
    """Parse the JSON document produced by the system query.

    Malformed documents or records yield empty fields rather than errors.

    Args:
        output: JSON text from ConvertTo-Json.

    Returns:
        Parsed SystemInfo.
    """
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        logger.debug("Invalid system query output: %s", e)
        return SystemInfo()
    if not isinstance(data, dict):
        return SystemInfo()

    cpu = data.get("cpu")
    cpu_name = cpu.strip() if isinstance(cpu, str) and cpu.strip() else None

    adapters = tuple(
        name.strip() for name in _as_list(data.get("adapters")) if isinstance(name, str) and name.strip()
    )

    modules: list[MemoryModule] = []
    for raw in _as_list(data.get("memory")):
        if not isinstance(raw, dict):
            continue
        capacity = _as_int(raw.get("Capacity"))
        if capacity is None:
            continue
        modules.append(MemoryModule(capacity_bytes=capacity, speed_mhz=_as_int(raw.get("Speed"))))

    volumes: list[VolumeSpace] = []
    for raw in _as_list(data.get("volumes")):
        if not isinstance(raw, dict):
            continue
        name = raw.get("DeviceID")
        free = _as_int(raw.get("FreeSpace"))
        if not isinstance(name, str) or free is None:
            continue
        volumes.append(VolumeSpace(name=name, free_bytes=free, size_bytes=_as_int(raw.get("Size"))))

    return SystemInfo(
        cpu_name=cpu_name,
        adapters=adapters,
        memory_modules=tuple(modules),
        volumes=tuple(volumes),
    )


def query_system_info() -> SystemInfo:
    """Query processor, adapters, memory modules and fixed volumes.

    Returns:
        SystemInfo snapshot; empty if the query is unavailable or fails.
    """
    output = _run_powershell(_SYSTEM_QUERY)
    if output is None:
        return SystemInfo()
    return parse_system_info(output)
