"""Sidebar UI renderer for the campus navigator.

Renders the left sidebar with:
- Category selector, frequent-only toggle and search box
- "My Location" and "Add Marker" buttons
- The current position (or why it could not be obtained)
- The filtered location list with distances and focus buttons

All rendering logic is encapsulated to keep the main app.py concise.
"""

import logging
from collections.abc import Sequence
from typing import Any

import streamlit as st

from campus_navigator.constants import CategoryConfig
from campus_navigator.core.proximity import AnnotatedPoint
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.message import (
    CatalogLoadingMessage,
    NoLocationsFoundMessage,
    UserPositionMessage,
)
from campus_navigator.ui.actions import reload_data, request_location, update_criteria
from campus_navigator.ui.context import NavigatorContext

logger = logging.getLogger(__name__)


class SidebarRenderer:
    """Renders the sidebar UI and returns action flags.

    Filter widgets build a fresh FilterCriteria that replaces the current
    one before the list is drawn, so the list always matches the widgets.
    Location and reload requests run immediately for the same reason.
    """

    def __init__(self, nav: NavigatorContext) -> None:
        """Initialize sidebar renderer with the session context."""
        self.nav = nav

    def render(self) -> dict[str, Any]:
        """Render complete sidebar and return action flags.

        Returns:
            Dict with keys:
            - items: The visible, annotated locations as listed
            - select: Id of the item whose focus button was clicked, or None
            - add_marker: "Add Marker" clicked
        """
        with st.sidebar:
            update_criteria(self.nav, self._render_filters())

            locate, add_marker, reload = self._render_buttons()
            if reload:
                with st.spinner("Loading locations..."):
                    reload_data(self.nav)
            if locate:
                with st.spinner("Getting your location..."):
                    request_location(self.nav)
            self._render_position()

            st.divider()
            items = self.nav.visible_items()
            select = self._render_location_list(items)

        return {"items": items, "select": select, "add_marker": add_marker}

    def _render_filters(self) -> FilterCriteria:
        current = self.nav.criteria
        current_category = current.category if current.category == CategoryConfig.ALL else current.category.value

        st.markdown("### 🔎 Find a place")
        query = st.text_input(
            "Search",
            value=current.query,
            placeholder="Search locations...",
            key="filter_query",
        )
        category = st.selectbox(
            "Category",
            options=CategoryConfig.SELECTOR_OPTIONS,
            index=CategoryConfig.SELECTOR_OPTIONS.index(current_category),
            key="filter_category",
        )
        frequent_only = st.checkbox(
            "⭐ Frequently used only",
            value=current.frequent_only,
            key="filter_frequent",
        )
        return current.with_category(category).with_query(query).with_frequent_only(frequent_only)

    def _render_buttons(self) -> tuple[bool, bool, bool]:
        col1, col2 = st.columns(2)
        with col1:
            locate = st.button(
                "📍 My Location",
                use_container_width=True,
                help="Show distances from where you are",
            )
        with col2:
            add_marker = st.button(
                "➕ Add Marker",
                use_container_width=True,
                disabled=self.nav.marker_form.is_open,
                help="Save a place of your own",
            )
        reload = st.button("🔄 Reload", use_container_width=True, help="Fetch locations and markers again")
        return locate, add_marker, reload

    def _render_position(self) -> None:
        if self.nav.location_error is not None:
            self.nav.location_error.display()
        elif self.nav.position is not None:
            UserPositionMessage(latitude=self.nav.position.latitude, longitude=self.nav.position.longitude).display()

    def _render_location_list(self, items: Sequence[AnnotatedPoint]) -> str | None:
        """List the visible locations; returns the id whose button was clicked."""
        if not self.nav.catalog_store.catalog_loaded:
            CatalogLoadingMessage().display()
            return None
        if not items:
            NoLocationsFoundMessage().display()
            return None

        st.caption(f"{len(items)} of {len(self.nav.catalog_store.catalog)} locations")
        focused_id = self.nav.viewport.focused_id
        clicked: str | None = None
        for item in items:
            poi = item.poi
            star = " ⭐" if poi.is_frequently_used else ""
            distance = f" • {item.distance_label}" if item.distance_label else ""
            details = " • ".join(part for part in (poi.building_code, poi.floor_label) if part)

            with st.container(border=True):
                st.markdown(f"**{poi.name}**{star}")
                st.caption(f"{poi.category.value}{distance}" + (f" • {details}" if details else ""))
                if poi.description:
                    st.caption(poi.description)
                if st.button(
                    "🎯 Focused" if poi.id == focused_id else "🎯 Show on map",
                    key=f"select_{poi.id}",
                    use_container_width=True,
                    type="primary" if poi.id == focused_id else "secondary",
                ):
                    clicked = poi.id
        return clicked
