"""Catalog command implementation.

Lists the applications winkit can install.
"""

import typer

from winkit.cli.display import create_catalog_table
from winkit.models.catalog import DEFAULT_CATALOG
from winkit.utils.formatting import console

app = typer.Typer(
    help="List installable applications.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_catalog() -> None:
    """Show every catalog application with its key and package ID."""
    console.print(create_catalog_table(DEFAULT_CATALOG))
    console.print(f"\n[muted]{len(DEFAULT_CATALOG)} applications. Install with 'winkit install -a <key>'.[/]")
