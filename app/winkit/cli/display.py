"""Shared Rich display functions for catalog, plan and hardware output."""

from rich.table import Table

from winkit.models.catalog import Catalog
from winkit.models.hardware import GpuVendor, SystemInfo
from winkit.models.plan import RunPlan
from winkit.utils.formatting import format_bytes


def create_catalog_table(catalog: Catalog, selected: frozenset[str] = frozenset()) -> Table:
    """Create a numbered table of catalog entries.

    Args:
        catalog: Catalog to display.
        selected: Keys to mark as selected.

    Returns:
        Rich Table with #, Key, Application and Package ID columns.
    """
    table = Table(
        title="Application Catalog",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", width=3, justify="right", style="muted")
    table.add_column("", width=2, justify="center")
    table.add_column("Key", no_wrap=True)
    table.add_column("Application", style="package.name")
    table.add_column("Package ID", style="package.id")

    for number, entry in enumerate(catalog, start=1):
        mark = "[success]✔[/]" if entry.key in selected else ""
        table.add_row(str(number), mark, entry.key, entry.display_name, entry.package_id)

    return table


def create_plan_table(plan: RunPlan, dry_run: bool = False) -> Table:
    """Create a table listing the steps of a run plan in execution order."""
    title = "Run Plan (Dry Run)" if dry_run else "Run Plan"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", width=3, justify="right", style="muted")
    table.add_column("Step", width=12)
    table.add_column("Name", no_wrap=True)
    table.add_column("Package ID", style="package.id")

    for number, step in enumerate(plan, start=1):
        package_id = step.entry.package_id if step.entry else ""
        table.add_row(str(number), step.step_type.value, step.label, package_id)

    return table


_VENDOR_LABELS: dict[GpuVendor, str] = {
    GpuVendor.NVIDIA: "NVIDIA",
    GpuVendor.AMD: "AMD",
    GpuVendor.UNKNOWN: "unknown",
}


def create_system_table(info: SystemInfo, vendor: GpuVendor) -> Table:
    """Create a two-column table of host hardware information.

    Args:
        info: Hardware snapshot.
        vendor: GPU vendor detected from the adapters.

    Returns:
        Rich Table with Component and Details columns.
    """
    table = Table(
        title="System Information",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Component", style="bold_header", no_wrap=True)
    table.add_column("Details")

    table.add_row("CPU", info.cpu_name or "[muted]unknown[/]")

    if info.adapters:
        for adapter in info.adapters:
            table.add_row("GPU", adapter)
    else:
        table.add_row("GPU", "[muted]none reported[/]")
    table.add_row("GPU vendor", _VENDOR_LABELS[vendor])

    if info.memory_modules:
        table.add_row("Memory", format_bytes(info.total_memory_bytes))
        for index, module in enumerate(info.memory_modules, start=1):
            speed = f" @ {module.speed_mhz} MHz" if module.speed_mhz else ""
            table.add_row(f"  Module {index}", f"{format_bytes(module.capacity_bytes)}{speed}")
    else:
        table.add_row("Memory", "[muted]unknown[/]")

    for volume in info.volumes:
        total = f" of {format_bytes(volume.size_bytes)}" if volume.size_bytes else ""
        table.add_row(f"Disk {volume.name}", f"{format_bytes(volume.free_bytes)} free{total}")

    return table
