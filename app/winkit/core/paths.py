"""Configuration path management for winkit.

Config files live in a per-user directory:
- $XDG_CONFIG_HOME/winkit/ when XDG_CONFIG_HOME is set
- %APPDATA%/winkit/ on Windows
- ~/.config/winkit/ otherwise

winkit keeps no state between runs, so there is no state or cache directory.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "winkit"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to the winkit configuration directory.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to <config dir>/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to <config dir>/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
