"""Geodesic calculations on Earth's surface.

Provides the distance helpers behind the proximity annotations:
- Distance calculation (Haversine formula)
- Human-readable distance labels ("120m", "1.4km")

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, isfinite, radians, sin, sqrt
from typing import Protocol

# Earth's radius in meters (spherical approximation)
EARTH_RADIUS_M = 6_371_000

# Distances at or above this are labelled in kilometers
KILOMETER_THRESHOLD_M = 1000


class HasCoordinates(Protocol):
    """Anything with WGS84 latitude/longitude in decimal degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees (WGS84). Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters (always >= 0).
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Rounding can push a a hair above 1 for antipodal points
        a = min(1.0, a)
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def format_distance(meters: float) -> str:
        """Render a distance for display.

        Below 1000 m: rounded integer meters ("999m").
        From 1000 m: kilometers with one decimal ("1.5km").

        Raises:
            ValueError: If meters is negative or not finite.
        """
        if not isfinite(meters) or meters < 0:
            raise ValueError(f"Distance must be a finite non-negative number, got {meters}")
        if meters < KILOMETER_THRESHOLD_M:
            return f"{round(meters)}m"
        return f"{meters / 1000:.1f}km"


def distance_meters(a: HasCoordinates, b: HasCoordinates) -> float:
    """Haversine distance in meters between two coordinate holders."""
    return GeoCalculator.haversine_distance_m(
        lat1=a.latitude,
        lon1=a.longitude,
        lat2=b.latitude,
        lon2=b.longitude,
    )


def format_distance(meters: float) -> str:
    """Module-level alias for GeoCalculator.format_distance."""
    return GeoCalculator.format_distance(meters)
