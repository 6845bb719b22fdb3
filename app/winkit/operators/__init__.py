"""Package operators for executing installs and upgrades."""

from winkit.operators.base import Operator
from winkit.operators.winget import WingetOperator

__all__ = ["Operator", "WingetOperator"]
