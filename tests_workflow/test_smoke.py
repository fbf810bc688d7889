"""Smoke tests for module imports and configuration validation.

Quick tests that verify the system is correctly installed and configured.
"""

import pytest

from campus_navigator.constants import CategoryConfig, LocationConfig, MapConfig, MarkerConfig, StyleConfig
from campus_navigator.model.custom_marker import is_hex_color
from campus_navigator.model.point_of_interest import Category

# =============================================================================
# MODULE IMPORT TESTS
# =============================================================================


class TestModuleImports:
    """Parametrized smoke tests for module imports."""

    @pytest.mark.parametrize(
        "module_path,class_name",
        [
            # Core modules
            pytest.param("campus_navigator.core.catalog_store", "CatalogStore", id="core_catalog"),
            pytest.param("campus_navigator.core.geo_calculator", "GeoCalculator", id="core_geo"),
            pytest.param("campus_navigator.core.location_provider", "LiveLocationProvider", id="core_location"),
            pytest.param("campus_navigator.core.view_lifetime", "ViewLifetime", id="core_lifetime"),
            # Data modules
            pytest.param("campus_navigator.data.campus_store", "SupabaseCampusStore", id="data_store"),
            # Model modules
            pytest.param("campus_navigator.model.point_of_interest", "PointOfInterest", id="model_poi"),
            pytest.param("campus_navigator.model.custom_marker", "CustomMarker", id="model_marker"),
            pytest.param("campus_navigator.model.filter_criteria", "FilterCriteria", id="model_criteria"),
            # UI modules
            pytest.param("campus_navigator.ui.center_map", "MapRenderer", id="ui_map"),
            pytest.param("campus_navigator.ui.context", "NavigatorContext", id="ui_context"),
            pytest.param("campus_navigator.ui.left_panel", "SidebarRenderer", id="ui_sidebar"),
            pytest.param("campus_navigator.ui.marker_flow", "MarkerCreationFlow", id="ui_marker_flow"),
            pytest.param("campus_navigator.ui.state_machine", "ViewportStateMachine", id="ui_statemachine"),
        ],
    )
    def test_module_import(self, module_path: str, class_name: str) -> None:
        """Module can be imported without errors."""
        import importlib

        module = importlib.import_module(module_path)
        cls = getattr(module, class_name)
        assert cls is not None


# =============================================================================
# CONFIGURATION VALIDATION TESTS
# =============================================================================


class TestConfigurationValidation:
    """Tests that configuration constants are valid and consistent."""

    def test_zoom_levels(self) -> None:
        assert MapConfig.OVERVIEW_ZOOM < MapConfig.FOCUS_ZOOM

    def test_start_center_is_valid(self) -> None:
        assert -90.0 <= MapConfig.START_CENTER_LAT <= 90.0
        assert -180.0 <= MapConfig.START_CENTER_LON <= 180.0

    @pytest.mark.parametrize("category", list(Category), ids=lambda c: c.name)
    def test_category_color_is_hex(self, category: Category) -> None:
        assert is_hex_color(category.color)

    def test_category_colors_only_for_known_categories(self) -> None:
        known = {c.value for c in Category}
        assert set(CategoryConfig.COLORS) <= known

    @pytest.mark.parametrize(
        "color",
        [CategoryConfig.DEFAULT_COLOR, MarkerConfig.DEFAULT_COLOR, StyleConfig.USER_POSITION_COLOR],
    )
    def test_default_colors_are_hex(self, color: str) -> None:
        assert is_hex_color(color)

    def test_marker_icon_tag(self) -> None:
        assert MarkerConfig.ICON == "map-pin"

    def test_location_timeout_positive(self) -> None:
        assert LocationConfig.TIMEOUT_S > 0

    def test_data_store_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from campus_navigator.constants import DataStoreSettings

        monkeypatch.setenv("SUPABASE_URL", "https://campus.example.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("CAMPUS_NAVIGATOR_TIMEOUT_S", "4.5")
        settings = DataStoreSettings(_env_file=None)
        assert settings.supabase_url == "https://campus.example.co"
        assert settings.supabase_anon_key == "anon"
        assert settings.campus_navigator_timeout_s == 4.5


# =============================================================================
# STATE MACHINE TESTS
# =============================================================================


class TestStateMachineConfiguration:
    """Tests for state machine setup."""

    @pytest.mark.parametrize("state_name", ["idle", "focused"])
    def test_viewport_has_state(self, state_name: str) -> None:
        from campus_navigator.ui.state_machine import ViewportStateMachine

        sm, _ = ViewportStateMachine.create(add_logger=False)
        assert state_name in [s.id for s in sm.states]

    @pytest.mark.parametrize("state_name", ["closed", "creating", "submitting", "failed"])
    def test_marker_form_has_state(self, state_name: str) -> None:
        from campus_navigator.ui.state_machine import MarkerFormStateMachine

        sm, _ = MarkerFormStateMachine.create(add_logger=False)
        assert state_name in [s.id for s in sm.states]
