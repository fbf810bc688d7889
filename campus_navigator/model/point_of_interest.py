"""PointOfInterest - A canonical campus location from the shared catalog.

Records are created and edited only by the remote data store; the
navigator reads them. Every record carries one of the closed categories.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from campus_navigator.constants import CategoryConfig


class Category(str, Enum):
    """Closed category enumeration (values match the store's strings)."""

    ACADEMIC = "Academic"
    ADMINISTRATIVE = "Administrative"
    HOSTEL = "Hostel"
    FOOD_AND_DINING = "Food & Dining"
    SPORTS = "Sports"
    HEALTHCARE = "Healthcare"
    TRANSPORTATION = "Transportation"
    BANKING = "Banking"
    SHOPPING = "Shopping"
    EVENTS = "Events"
    FITNESS = "Fitness"

    @property
    def color(self) -> str:
        """Display color, falling back to the default for uncolored categories."""
        return CategoryConfig.COLORS.get(self.value, CategoryConfig.DEFAULT_COLOR)


assert [c.value for c in Category] == CategoryConfig.NAMES, "Category enum out of sync with CategoryConfig.NAMES"


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise ValueError unless latitude/longitude are finite and in range."""
    if not (np.isfinite(latitude) and np.isfinite(longitude)):
        raise ValueError(f"Coordinates must be finite, got ({latitude}, {longitude})")
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"Latitude {latitude} outside [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"Longitude {longitude} outside [-180, 180]")


def _optional_text(value: Any) -> str | None:
    """Store rows use null or "" for missing optional text."""
    if value is None:
        return None
    text = str(value)
    return text if text else None


@dataclass(frozen=True)
class PointOfInterest:
    """A campus location.

    Attributes:
        id: Opaque unique identifier
        name: Display name
        category: One of the closed categories
        description: Free text (may be empty)
        latitude: Decimal degrees in [-90, 90]
        longitude: Decimal degrees in [-180, 180]
        building_code: Optional short code such as "TP-1"
        floor_label: Optional floor label such as "Ground"
        is_frequently_used: Highlighted as a popular destination

    Example:
        poi = PointOfInterest(
            id="1", name="Central Library", category=Category.ACADEMIC,
            description="Main library", latitude=12.8231, longitude=80.0442,
        )
    """

    id: str
    name: str
    category: Category
    description: str
    latitude: float
    longitude: float
    building_code: str | None = None
    floor_label: str | None = None
    is_frequently_used: bool = False

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not isinstance(self.category, Category):
            raise ValueError(f"PointOfInterest {self.id} has invalid category {self.category!r}")
        validate_coordinates(latitude=self.latitude, longitude=self.longitude)

    @property
    def color(self) -> str:
        """Marker color for this location's category."""
        return self.category.color

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.longitude, self.latitude)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PointOfInterest":
        """Create from a `campus_locations` row.

        Raises:
            ValueError: Unknown category, missing field or out-of-range coordinates.
        """
        try:
            category = Category(row["category"])
        except (KeyError, ValueError) as e:
            raise ValueError(f"Location {row.get('id')!r} has invalid category {row.get('category')!r}") from e
        try:
            return cls(
                id=str(row["id"]),
                name=str(row["name"]),
                category=category,
                description=str(row.get("description") or ""),
                latitude=float(row["latitude"]),
                longitude=float(row["longitude"]),
                building_code=_optional_text(row.get("building_code")),
                floor_label=_optional_text(row.get("floor_number")),
                is_frequently_used=bool(row.get("is_frequently_used", False)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed location row {row.get('id')!r}: {e}") from e

    def __repr__(self) -> str:
        return f"PointOfInterest({self.id}, {self.name!r}, {self.category.value}, lat={self.latitude:.5f}, lon={self.longitude:.5f})"
