"""CLI commands for winkit.

This package contains all subcommand implementations.
"""

from winkit.cli.commands import catalog, config, install, sysinfo, update

__all__ = ["catalog", "config", "install", "sysinfo", "update"]
