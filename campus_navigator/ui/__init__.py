"""User interface components for the campus navigator.

File Structure (layout-based naming):
- left_panel.py: Sidebar with filters, location buttons and the location list
- center_map.py: Pydeck map with locations, custom markers and position
- marker_dialog.py: Add-marker dialog

Core Components:
- state_machine.py: ViewportStateMachine + MarkerFormStateMachine
- context.py: NavigatorContext composing one session
- actions.py: All action functions (load, filter, locate, select, save)
- marker_flow.py: Validate-and-save orchestration for custom markers
- validators.py: Input validation with Optional[Message] returns
- infra.py: Mockable rerun and async bridge
"""

from campus_navigator.ui import infra
from campus_navigator.ui.actions import (
    cancel_marker_dialog,
    handle_map_selection,
    load_data,
    open_marker_dialog,
    reload_data,
    request_location,
    select_location,
    submit_marker,
    update_criteria,
)
from campus_navigator.ui.center_map import MapRenderer
from campus_navigator.ui.context import NavigatorContext
from campus_navigator.ui.left_panel import SidebarRenderer
from campus_navigator.ui.marker_dialog import marker_dialog
from campus_navigator.ui.marker_flow import MarkerCreationFlow
from campus_navigator.ui.state_machine import (
    CameraCommand,
    MarkerFormStateMachine,
    TransitionLogger,
    ViewportStateMachine,
)

__all__ = [
    "ViewportStateMachine",
    "MarkerFormStateMachine",
    "CameraCommand",
    "TransitionLogger",
    "NavigatorContext",
    "MarkerCreationFlow",
    "MapRenderer",
    "SidebarRenderer",
    "marker_dialog",
    "infra",
    "cancel_marker_dialog",
    "handle_map_selection",
    "load_data",
    "open_marker_dialog",
    "reload_data",
    "request_location",
    "select_location",
    "submit_marker",
    "update_criteria",
]
