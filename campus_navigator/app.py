"""Campus Navigator - Interactive campus map.

Browse the campus catalog on a map, filter it by category, text and
frequency, see walking distances from your position and keep personal
custom markers.

Run: streamlit run campus_navigator/app.py
"""

import logging
import traceback

import streamlit as st

from campus_navigator.constants import AppConfig, DataStoreConfig, MapConfig
from campus_navigator.core.location_provider import default_position_source
from campus_navigator.core.map_view import visible_selection
from campus_navigator.core.proximity import AnnotatedPoint
from campus_navigator.data.campus_store import SupabaseCampusStore
from campus_navigator.model.message import DataStoreNotConfiguredMessage
from campus_navigator.ui import (
    MapRenderer,
    NavigatorContext,
    SidebarRenderer,
    handle_map_selection,
    infra,
    load_data,
    marker_dialog,
    open_marker_dialog,
    select_location,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Create the session's NavigatorContext on first run."""
    if "navigator" not in st.session_state:
        st.session_state.navigator = NavigatorContext.create(
            store=SupabaseCampusStore.from_config(),
            source=default_position_source(),
            owner_id=DataStoreConfig.USER_ID,
        )


def reset_ui_state() -> None:
    """Reset UI state to initial while preserving the loaded data.

    Called when an error occurs to recover gracefully. Resets:
    - Viewport and marker form state machines
    - Filter criteria and location error

    Preserves:
    - Catalog and custom marker snapshots
    - Last known position
    """
    logger.info("Resetting UI state due to error recovery")
    nav: NavigatorContext = st.session_state.navigator
    nav.reset_ui()


# =============================================================================
# MAP RENDERING
# =============================================================================


def _render_map(nav: NavigatorContext, items: tuple[AnnotatedPoint, ...]) -> None:
    """Render the map and focus whatever gets picked on it."""
    vctx = nav.viewport_context
    deck = MapRenderer().render(
        items=items,
        custom_markers=nav.catalog_store.custom_markers,
        camera=vctx.camera,
        position=nav.position,
        focused_id=vctx.focused_id,
    )

    # Stable key: deck.gl stays mounted and animates between view states
    event = st.pydeck_chart(
        deck,
        height=MapConfig.MAP_HEIGHT,
        on_select="rerun",
        selection_mode="single-object",
        key="campus_map",
    )
    if handle_map_selection(nav, event.selection):
        infra.trigger_rerun()

    focused = visible_selection(items, vctx.focused_id)
    if focused is not None:
        distance = f" • {focused.distance_label} away" if focused.distance_label else ""
        st.markdown(f"**🎯 {focused.poi.name}** ({focused.poi.category.value}){distance}")
        if focused.poi.description:
            st.caption(focused.poi.description)


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(f"{AppConfig.ICON} {AppConfig.TITLE}")
    st.caption(AppConfig.SUBTITLE)

    try:
        _run_app_ui()
    except Exception as e:
        # Log full traceback for debugging
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")

        # Reset UI state while preserving the loaded data
        reset_ui_state()

        if st.button("🔄 Reset and Continue", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    nav: NavigatorContext = st.session_state.navigator
    logger.info(
        f"[MAIN] Render cycle: viewport={nav.viewport.get_state_name()}, "
        f"form={nav.marker_form.get_state_name()}, criteria={nav.criteria}"
    )

    if not DataStoreConfig.is_configured():
        DataStoreNotConfiguredMessage().display()

    if not nav.data_loaded:
        with st.spinner("Loading locations..."):
            load_data(nav)

    sidebar = SidebarRenderer(nav=nav)
    actions = sidebar.render()

    if actions["select"] is not None and select_location(nav, actions["select"]):
        infra.trigger_rerun()
    if actions["add_marker"]:
        open_marker_dialog(nav)

    _render_map(nav, actions["items"])

    if nav.marker_form.is_open:
        marker_dialog(nav)


if __name__ == "__main__":
    main()
