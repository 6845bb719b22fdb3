"""Availability probers for checking whether packages are installed."""

from winkit.probers.base import (
    MATCH_STRATEGIES,
    ColumnMatch,
    LineStartMatch,
    MatchStrategy,
    Prober,
)
from winkit.probers.winget import WingetProber

__all__ = [
    "MATCH_STRATEGIES",
    "ColumnMatch",
    "LineStartMatch",
    "MatchStrategy",
    "Prober",
    "WingetProber",
]
