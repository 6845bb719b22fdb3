"""Data models for winkit.

This module exports the core data structures used throughout the application.
"""

from winkit.models.catalog import DEFAULT_CATALOG, Catalog, CatalogEntry
from winkit.models.event import StepEvent, StepKind, StepUpdate
from winkit.models.hardware import GpuVendor, MemoryModule, SystemInfo, VolumeSpace
from winkit.models.plan import PlanStep, RunPlan, StepType

__all__ = [
    "DEFAULT_CATALOG",
    "Catalog",
    "CatalogEntry",
    "GpuVendor",
    "MemoryModule",
    "PlanStep",
    "RunPlan",
    "StepEvent",
    "StepKind",
    "StepType",
    "StepUpdate",
    "SystemInfo",
    "VolumeSpace",
]
