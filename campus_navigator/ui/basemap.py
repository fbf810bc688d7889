"""OpenStreetMap raster basemap for the campus map.

Uses a Mapbox GL style dict to define the raster basemap.
This is the deck.gl approach for XYZ raster tiles because pydeck's
TileLayer alone only fetches tiles but doesn't render them - it requires a
renderSubLayers callback which pydeck doesn't expose to Python.

The style dict defines:
- sources: Where to fetch tiles
- layers: How to render them (as raster with zoom limits)

No API key required. Requires map_provider="mapbox" in pdk.Deck().
"""

from campus_navigator.constants import StyleConfig

OSM_MAX_ZOOM = 19

OSM_STYLE: dict[str, object] = {
    "version": 8,
    "sources": {
        "osm": {
            "type": "raster",
            "tiles": [StyleConfig.BASEMAP_TILES],
            "tileSize": 256,
            "attribution": StyleConfig.BASEMAP_ATTRIBUTION,
        }
    },
    "layers": [
        {
            "id": "osm",
            "type": "raster",
            "source": "osm",
            "minzoom": 0,
            "maxzoom": OSM_MAX_ZOOM,
        }
    ],
}
