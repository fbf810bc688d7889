"""UI Actions - All action functions for the campus navigator.

Centralizes the functions that modify session state, trigger state
machine transitions or call the async boundaries.

This module handles:
- Data loading (load_data, reload_data)
- Filtering (update_criteria)
- Location (request_location)
- Focus (select_location, handle_map_selection)
- Custom markers (open_marker_dialog, submit_marker, cancel_marker_dialog)

Every action takes the NavigatorContext explicitly; app.py owns the
st.session_state lookup.
"""

import logging
from collections.abc import Mapping
from typing import Any

from campus_navigator.core.location_provider import LocationError
from campus_navigator.model.custom_marker import MarkerDraft
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.message import LocationFailedMessage, MarkerSavedMessage
from campus_navigator.ui import infra
from campus_navigator.ui.center_map import selected_item_id
from campus_navigator.ui.context import NavigatorContext
from campus_navigator.ui.state_machine import select_item

logger = logging.getLogger(__name__)


# =============================================================================
# DATA LOADING
# =============================================================================


def load_data(nav: NavigatorContext) -> None:
    """Run the initial catalog + marker loads once per session."""
    if nav.data_loaded:
        return
    logger.info(f"[LOAD] Loading catalog and markers for owner={nav.owner_id}")
    infra.run_async(nav.catalog_store.load_all(owner_id=nav.owner_id))
    nav.data_loaded = True


def reload_data(nav: NavigatorContext) -> None:
    """Re-fetch both collections, replacing the current snapshots."""
    nav.data_loaded = False
    load_data(nav)


# =============================================================================
# FILTERING
# =============================================================================


def update_criteria(nav: NavigatorContext, criteria: FilterCriteria) -> bool:
    """Replace the filter criteria. Returns True if anything changed."""
    if criteria == nav.criteria:
        return False
    logger.info(f"[FILTER] {nav.criteria} -> {criteria}")
    nav.criteria = criteria
    return True


# =============================================================================
# LOCATION
# =============================================================================


def request_location(nav: NavigatorContext) -> bool:
    """Ask the host for the user's position once.

    On success the position is replaced and any previous error cleared. On
    failure the position stays unchanged and a LocationFailedMessage is kept
    for display.

    Returns:
        True if a position was obtained.
    """
    try:
        position = infra.run_async(nav.location_provider.request_position())
    except LocationError as e:
        nav.location_error = LocationFailedMessage(reason=e.reason.value, detail=e.detail)
        return False
    nav.position = position
    nav.location_error = None
    return True


# =============================================================================
# FOCUS
# =============================================================================


def select_location(nav: NavigatorContext, item_id: str) -> bool:
    """Focus the camera on a catalog location or custom marker by id."""
    item = nav.catalog_store.find_item(item_id)
    if item is None:
        logger.warning(f"[SELECT] Unknown item {item_id}, ignoring")
        return False
    select_item(nav.viewport, item)
    return True


def handle_map_selection(nav: NavigatorContext, selection: Mapping[str, Any] | None) -> bool:
    """Focus whatever was picked on the map. Returns True if the camera moved.

    The chart reports its current selection on every rerun, so only a pick
    that differs from the last one handled moves the camera.
    """
    item_id = selected_item_id(selection)
    if item_id == nav.handled_map_pick:
        return False
    nav.handled_map_pick = item_id
    if item_id is None:
        return False
    return select_location(nav, item_id)


# =============================================================================
# CUSTOM MARKERS
# =============================================================================


def open_marker_dialog(nav: NavigatorContext) -> None:
    nav.marker_flow.open()


def cancel_marker_dialog(nav: NavigatorContext) -> None:
    nav.marker_flow.cancel()


def submit_marker(nav: NavigatorContext, draft: MarkerDraft) -> MarkerSavedMessage | None:
    """Validate and store the draft.

    Returns:
        A confirmation message when stored, None otherwise. The reason for a
        refusal is left on nav.form_context (validation or error).
    """
    saved = infra.run_async(nav.marker_flow.submit(owner_id=nav.owner_id, draft=draft))
    if not saved:
        return None
    return nav.marker_flow.saved_message(draft)

