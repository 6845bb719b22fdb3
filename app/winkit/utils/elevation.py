"""Privilege checks.

winget installs machine-wide packages, which requires an elevated process.
"""

import ctypes
import logging
import os
import sys

logger = logging.getLogger(__name__)


def is_elevated() -> bool:
    """Check if the current process runs with administrative privileges.

    On Windows this asks the shell whether the user is an administrator;
    on other platforms it checks for an effective uid of 0.

    Returns:
        True if the process is privileged, False otherwise (including when
        the check itself fails).
    """
    if sys.platform == "win32":
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        except (AttributeError, OSError) as e:
            logger.debug("Elevation check failed: %s", e)
            return False
    return os.geteuid() == 0
