"""MapRenderer - Pydeck map rendering for the campus map.

Renders the map surface with GPU-accelerated deck.gl:
- OpenStreetMap raster basemap
- Filtered catalog locations colored by category (ScatterplotLayer)
- The user's custom markers in their own colors (ScatterplotLayer)
- The user's one-shot position (ScatterplotLayer)
- A highlight ring around the focused item

Key conventions:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict] for GPU streaming
- pickable=True enables click selection
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import pydeck as pdk

from campus_navigator.constants import CategoryConfig, StyleConfig
from campus_navigator.core.proximity import AnnotatedPoint
from campus_navigator.model.custom_marker import CustomMarker, is_hex_color
from campus_navigator.model.user_position import UserPosition
from campus_navigator.ui.basemap import OSM_STYLE
from campus_navigator.ui.state_machine import CameraCommand

logger = logging.getLogger(__name__)

# Layer ids double as selection keys in st.pydeck_chart events
LAYER_LOCATIONS = "locations"
LAYER_CUSTOM_MARKERS = "custom_markers"
LAYER_USER_POSITION = "user_position"
LAYER_SELECTION = "selection"


def hex_to_rgba(color: str, alpha: int = 255) -> list[int]:
    """Convert "#rgb"/"#rrggbb" to [R, G, B, A]; invalid colors use the default gray."""
    if not is_hex_color(color):
        logger.warning(f"[RENDER] Invalid color {color!r}, using default")
        color = CategoryConfig.DEFAULT_COLOR
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return [int(digits[i : i + 2], 16) for i in (0, 2, 4)] + [alpha]


def selected_item_id(selection: Mapping[str, Any] | None) -> str | None:
    """Id of the picked location or custom marker from a st.pydeck_chart selection.

    The selection looks like {"indices": {layer_id: [...]}, "objects": {layer_id: [row, ...]}}.
    Picks on the user position or selection ring are ignored.
    """
    if not selection:
        return None
    objects = selection.get("objects") or {}
    for layer_id in (LAYER_LOCATIONS, LAYER_CUSTOM_MARKERS):
        for row in objects.get(layer_id) or []:
            item_id = row.get("id")
            if item_id:
                return str(item_id)
    return None


@dataclass
class LayerCollection:
    """Manages Pydeck layers with correct z-ordering.

    Z-order (back to front): locations → custom markers → selection ring → user position
    """

    locations: list[pdk.Layer] = field(default_factory=list)
    custom_markers: list[pdk.Layer] = field(default_factory=list)
    selection: list[pdk.Layer] = field(default_factory=list)
    user_position: list[pdk.Layer] = field(default_factory=list)

    def get_ordered_layers(self) -> list[pdk.Layer]:
        """Return all layers in correct z-order (back to front)."""
        return self.locations + self.custom_markers + self.selection + self.user_position


class MapRenderer:
    """Renders the visible locations, custom markers and position on a Pydeck map.

    Example:
        renderer = MapRenderer()
        deck = renderer.render(items=visible, custom_markers=markers, camera=ctx.camera)
        st.pydeck_chart(deck)
    """

    @staticmethod
    def get_view_state(camera: CameraCommand) -> pdk.ViewState:
        """Create Pydeck ViewState from a camera command.

        Animated commands carry a transition duration so deck.gl flies to the
        target instead of jumping.
        """
        extra: dict[str, int] = {}
        if camera.animated:
            extra["transition_duration"] = camera.duration_ms
        return pdk.ViewState(
            latitude=camera.latitude,
            longitude=camera.longitude,
            zoom=camera.zoom,
            pitch=0,
            bearing=0,
            **extra,
        )

    def render(
        self,
        items: Sequence[AnnotatedPoint],
        custom_markers: Sequence[CustomMarker],
        camera: CameraCommand,
        position: UserPosition | None = None,
        focused_id: str | None = None,
    ) -> pdk.Deck:
        """Render complete map with all layers.

        Args:
            items: Filtered, annotated catalog locations
            custom_markers: The user's markers (always shown, not filtered)
            camera: Camera command to apply
            position: User position, drawn when known
            focused_id: Id of the focused item, highlighted when visible

        Returns:
            pdk.Deck object ready for display.
        """
        layers = LayerCollection()
        layers.locations.append(self._create_location_layer(items))
        layers.custom_markers.append(self._create_custom_marker_layer(custom_markers))

        focus_point = self._find_focus_point(items, custom_markers, focused_id)
        if focus_point is not None:
            layers.selection.append(self._create_selection_layer(focus_point))

        if position is not None:
            layers.user_position.append(self._create_user_position_layer(position))

        logger.debug(
            f"[RENDER] {len(items)} locations, {len(custom_markers)} custom markers, "
            f"position={'yes' if position else 'no'}, focused={focused_id}"
        )

        return pdk.Deck(
            map_style=OSM_STYLE,
            map_provider="mapbox",  # Required when map_style is a dict
            initial_view_state=self.get_view_state(camera),
            layers=layers.get_ordered_layers(),
            tooltip=self._create_tooltip_config(),
        )

    @staticmethod
    def _find_focus_point(
        items: Sequence[AnnotatedPoint],
        custom_markers: Sequence[CustomMarker],
        focused_id: str | None,
    ) -> tuple[float, float] | None:
        """(lon, lat) of the focused item if it is currently drawn."""
        if focused_id is None:
            return None
        for item in items:
            if item.id == focused_id:
                return item.poi.lon_lat
        for marker in custom_markers:
            if marker.id == focused_id:
                return marker.lon_lat
        return None

    def _create_location_layer(self, items: Sequence[AnnotatedPoint]) -> pdk.Layer:
        data = [
            {
                "type": "location",
                "id": item.id,
                "position": list(item.poi.lon_lat),
                "name": item.poi.name,
                "description": item.poi.description,
                "category": item.poi.category.value,
                "distance": item.distance_label or "",
                "color": hex_to_rgba(item.poi.color),
            }
            for item in items
        ]
        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_fill_color="color",
            get_line_color=[255, 255, 255, 255],
            get_radius=StyleConfig.POI_RADIUS_PX,
            radius_units="'pixels'",
            stroked=True,
            line_width_min_pixels=2,
            pickable=True,
            auto_highlight=True,
            id=LAYER_LOCATIONS,
        )

    def _create_custom_marker_layer(self, custom_markers: Sequence[CustomMarker]) -> pdk.Layer:
        data = [
            {
                "type": "custom",
                "id": marker.id,
                "position": list(marker.lon_lat),
                "name": f"{marker.name} (Custom)",
                "description": marker.description,
                "category": "Custom",
                "distance": "",
                "color": hex_to_rgba(marker.color),
            }
            for marker in custom_markers
        ]
        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_fill_color="color",
            get_line_color=[30, 30, 30, 255],
            get_radius=StyleConfig.CUSTOM_MARKER_RADIUS_PX,
            radius_units="'pixels'",
            stroked=True,
            line_width_min_pixels=2,
            pickable=True,
            auto_highlight=True,
            id=LAYER_CUSTOM_MARKERS,
        )

    def _create_selection_layer(self, lon_lat: tuple[float, float]) -> pdk.Layer:
        return pdk.Layer(
            "ScatterplotLayer",
            [{"position": list(lon_lat)}],
            get_position="position",
            get_fill_color=[0, 0, 0, 0],
            get_line_color=StyleConfig.SELECTED_OUTLINE_RGBA,
            get_radius=StyleConfig.SELECTED_RADIUS_PX,
            radius_units="'pixels'",
            stroked=True,
            filled=False,
            line_width_min_pixels=3,
            pickable=False,
            id=LAYER_SELECTION,
        )

    def _create_user_position_layer(self, position: UserPosition) -> pdk.Layer:
        data = [
            {
                "type": "user",
                "id": "user_position",
                "position": list(position.lon_lat),
                "name": "Your Location",
                "description": str(position),
                "category": "",
                "distance": "",
                "color": hex_to_rgba(StyleConfig.USER_POSITION_COLOR),
            }
        ]
        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_fill_color="color",
            get_line_color=[255, 255, 255, 255],
            get_radius=StyleConfig.USER_POSITION_RADIUS_PX,
            radius_units="'pixels'",
            stroked=True,
            line_width_min_pixels=3,
            pickable=True,
            id=LAYER_USER_POSITION,
        )

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        return {
            "html": "<b>{name}</b><br/>{description}<br/><i>{category}</i> {distance}",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#1a202c",
                "fontSize": "12px",
            },
        }
