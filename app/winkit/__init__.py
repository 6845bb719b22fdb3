"""winkit - checklist-driven winget installer for a fixed application catalog."""

__version__ = "0.1.0"
