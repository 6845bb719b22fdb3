"""winkit settings.

Settings are optional: without a config file every field takes its default.
Configuration is stored in <config dir>/config.toml, for example:

    winget_executable = "winget"
    probe_match = "column"
    gpu_advisory = false
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from winkit.core.paths import get_config_path

# How probe output is matched against a package identifier
ProbeMatch = Literal["line-start", "column"]

DEFAULT_NVIDIA_PACKAGE_ID = "Nvidia.GeForceExperience"
DEFAULT_AMD_SUPPORT_URL = "https://www.amd.com/en/support/download/drivers.html"


class Settings(BaseModel):
    """User settings for winkit.

    Attributes:
        winget_executable: Name or path of the winget executable.
        probe_match: Strategy for recognising a package in probe output.
        gpu_advisory: Run the GPU driver advisory after installs.
        nvidia_driver_package_id: Package installed for NVIDIA GPUs.
        amd_support_url: Page opened for AMD GPUs.
    """

    model_config = ConfigDict(extra="forbid")

    winget_executable: Annotated[
        str,
        Field(min_length=1, description="winget executable name or path"),
    ] = "winget"
    probe_match: Annotated[
        ProbeMatch,
        Field(description="Probe output matching strategy"),
    ] = "line-start"
    gpu_advisory: Annotated[
        bool,
        Field(description="Run the GPU driver advisory"),
    ] = True
    nvidia_driver_package_id: Annotated[
        str,
        Field(min_length=1, description="Driver utility package for NVIDIA GPUs"),
    ] = DEFAULT_NVIDIA_PACKAGE_ID
    amd_support_url: Annotated[
        str,
        Field(pattern=r"^https?://", description="Driver support page for AMD GPUs"),
    ] = DEFAULT_AMD_SUPPORT_URL


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the config content is invalid."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error; defaults are returned instead.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated Settings object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace().

    Args:
        settings: The Settings object to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
