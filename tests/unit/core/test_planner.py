"""Unit tests for the Selection-to-RunPlan builder."""

import pytest
from winkit.core.config import DEFAULT_NVIDIA_PACKAGE_ID
from winkit.core.planner import UPDATE_ALL_LABEL, UnknownSelectionError, build_run_plan
from winkit.models.catalog import Catalog
from winkit.models.hardware import GpuVendor
from winkit.models.plan import StepType


class TestBuildRunPlan:
    """Tests for build_run_plan."""

    def test_empty_selection(self, sample_catalog: Catalog) -> None:
        """Empty selection without extras yields an empty plan."""
        plan = build_run_plan(sample_catalog, [])
        assert len(plan) == 0
        assert plan.is_empty is True

    def test_steps_follow_catalog_order(self, sample_catalog: Catalog) -> None:
        """Selection order does not affect step order."""
        plan = build_run_plan(sample_catalog, ["vlc", "chrome", "steam"])
        assert [s.entry.key for s in plan if s.entry] == ["chrome", "steam", "vlc"]
        assert all(s.step_type == StepType.PACKAGE for s in plan)

    def test_labels_are_display_names(self, sample_catalog: Catalog) -> None:
        """Package steps are labelled with display names."""
        plan = build_run_plan(sample_catalog, {"chrome"})
        assert plan.steps[0].label == "Google Chrome"

    def test_duplicates_collapse(self, sample_catalog: Catalog) -> None:
        """Repeated keys produce one step."""
        plan = build_run_plan(sample_catalog, ["steam", "steam"])
        assert len(plan) == 1

    def test_update_all_is_appended_after_packages(self, sample_catalog: Catalog) -> None:
        """Update-all comes after every package step."""
        plan = build_run_plan(sample_catalog, {"vlc", "chrome"}, update_all=True)
        assert [s.step_type for s in plan] == [
            StepType.PACKAGE,
            StepType.PACKAGE,
            StepType.UPDATE_ALL,
        ]
        assert plan.steps[-1].label == UPDATE_ALL_LABEL
        assert "winget" not in plan.steps[-1].label
        assert plan.steps[-1].entry is None

    def test_update_all_only(self, sample_catalog: Catalog) -> None:
        """Update-all works with an empty selection."""
        plan = build_run_plan(sample_catalog, (), update_all=True)
        assert [s.step_type for s in plan] == [StepType.UPDATE_ALL]

    def test_nvidia_appends_driver_step_last(self, sample_catalog: Catalog) -> None:
        """NVIDIA adds a counted driver step after update-all."""
        plan = build_run_plan(
            sample_catalog, {"chrome"}, update_all=True, gpu_vendor=GpuVendor.NVIDIA
        )
        assert [s.step_type for s in plan] == [
            StepType.PACKAGE,
            StepType.UPDATE_ALL,
            StepType.GPU_DRIVER,
        ]
        driver = plan.steps[-1]
        assert driver.entry is not None
        assert driver.entry.package_id == DEFAULT_NVIDIA_PACKAGE_ID
        assert plan.gpu_vendor == GpuVendor.NVIDIA

    def test_custom_nvidia_package(self, sample_catalog: Catalog) -> None:
        """Driver package id is configurable."""
        plan = build_run_plan(
            sample_catalog, (), gpu_vendor=GpuVendor.NVIDIA, nvidia_package_id="Nvidia.App"
        )
        assert plan.steps[0].entry is not None
        assert plan.steps[0].entry.package_id == "Nvidia.App"

    @pytest.mark.parametrize("vendor", [GpuVendor.AMD, GpuVendor.UNKNOWN])
    def test_other_vendors_add_no_step(self, sample_catalog: Catalog, vendor: GpuVendor) -> None:
        """AMD and unknown vendors are advisory only and not counted."""
        plan = build_run_plan(sample_catalog, {"chrome", "steam"}, gpu_vendor=vendor)
        assert len(plan) == 2
        assert plan.gpu_vendor == vendor

    def test_disabled_advisory(self, sample_catalog: Catalog) -> None:
        """No vendor means no advisory."""
        plan = build_run_plan(sample_catalog, {"chrome"})
        assert plan.gpu_vendor is None

    def test_unknown_keys_rejected(self, sample_catalog: Catalog) -> None:
        """Unknown keys raise UnknownSelectionError listing them."""
        with pytest.raises(UnknownSelectionError, match="atom, zoom") as exc_info:
            build_run_plan(sample_catalog, ["chrome", "zoom", "atom"])
        assert exc_info.value.keys == ["atom", "zoom"]

    def test_unknown_selection_is_value_error(self, sample_catalog: Catalog) -> None:
        """UnknownSelectionError is a ValueError."""
        with pytest.raises(ValueError):
            build_run_plan(sample_catalog, ["nope"])
