"""CustomMarker - A user-created point shown next to the shared catalog.

Markers are owned by their creator and only ever read back for that owner.
The navigator creates them (append-only); it never edits or deletes them.
"""

import re
from dataclasses import dataclass
from typing import Any

from campus_navigator.constants import MarkerConfig
from campus_navigator.model.point_of_interest import validate_coordinates

HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: str) -> bool:
    """True for "#rgb" or "#rrggbb"."""
    return bool(HEX_COLOR_RE.match(value))


@dataclass(frozen=True)
class MarkerDraft:
    """Raw add-marker form input, kept as typed so a failed save can be retried.

    Latitude and longitude stay text until validation parses them.
    """

    name: str = ""
    description: str = ""
    latitude_text: str = ""
    longitude_text: str = ""
    color: str = MarkerConfig.DEFAULT_COLOR


@dataclass(frozen=True)
class CustomMarker:
    """A marker placed by a user.

    Attributes:
        id: Opaque identifier assigned by the store
        owner_id: Identifier of the creating user
        name: Display name
        description: Free text (may be empty)
        latitude: Decimal degrees in [-90, 90]
        longitude: Decimal degrees in [-180, 180]
        color: Display color as stored (normally "#rrggbb")
        icon: Icon tag, always MarkerConfig.ICON for markers made here
    """

    id: str
    owner_id: str
    name: str
    description: str
    latitude: float
    longitude: float
    color: str = MarkerConfig.DEFAULT_COLOR
    icon: str = MarkerConfig.ICON

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        validate_coordinates(latitude=self.latitude, longitude=self.longitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.longitude, self.latitude)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "CustomMarker":
        """Create from a `custom_markers` row.

        Raises:
            ValueError: Missing field or out-of-range coordinates.
        """
        try:
            return cls(
                id=str(row["id"]),
                owner_id=str(row["user_id"]),
                name=str(row["name"]),
                description=str(row.get("description") or ""),
                latitude=float(row["latitude"]),
                longitude=float(row["longitude"]),
                color=str(row.get("color") or MarkerConfig.DEFAULT_COLOR),
                icon=str(row.get("icon") or MarkerConfig.ICON),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed marker row {row.get('id')!r}: {e}") from e
