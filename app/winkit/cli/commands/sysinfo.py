"""Sysinfo command implementation.

Shows basic host hardware information.
"""

import typer

from winkit.cli.display import create_system_table
from winkit.core.gpu import detect_vendor
from winkit.utils.formatting import console, print_warning
from winkit.utils.hardware import query_system_info

app = typer.Typer(
    help="Show host hardware information.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_system_info() -> None:
    """Show CPU, GPU, memory and disk information."""
    info = query_system_info()
    if not info.adapters and info.cpu_name is None:
        print_warning("Hardware information is unavailable on this system.")

    console.print(create_system_table(info, detect_vendor(info.adapters)))
