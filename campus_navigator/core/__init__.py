"""Core logic for the campus map.

- GeoCalculator: Haversine distances and distance labels
- filter_engine: Category, frequency and text predicates over the catalog
- proximity: Distance annotation of filtered locations
- map_view: Explicit recomputation of the visible list
- CatalogStore: Loaded catalog and custom markers
- ViewLifetime: Discards async results that arrive after teardown
- LiveLocationProvider: One-shot host position requests
"""

from campus_navigator.core.catalog_store import CatalogStore
from campus_navigator.core.filter_engine import filter_catalog
from campus_navigator.core.geo_calculator import GeoCalculator, distance_meters, format_distance
from campus_navigator.core.location_provider import (
    LiveLocationProvider,
    LocationError,
    LocationFailure,
    PositionSource,
    TermuxPositionSource,
    default_position_source,
)
from campus_navigator.core.map_view import compute_visible_items, visible_selection
from campus_navigator.core.proximity import AnnotatedPoint, annotate_distances
from campus_navigator.core.view_lifetime import ViewLifetime

__all__ = [
    # Geo calculator
    "GeoCalculator",
    "distance_meters",
    "format_distance",
    # Filtering and proximity
    "filter_catalog",
    "AnnotatedPoint",
    "annotate_distances",
    "compute_visible_items",
    "visible_selection",
    # Loading
    "CatalogStore",
    "ViewLifetime",
    # Location
    "LiveLocationProvider",
    "LocationError",
    "LocationFailure",
    "PositionSource",
    "TermuxPositionSource",
    "default_position_source",
]
