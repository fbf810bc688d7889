"""UserPosition - A one-shot location reading of the user.

Set only after an explicit location request succeeds; never refreshed
automatically.
"""

from dataclasses import dataclass

from campus_navigator.model.point_of_interest import validate_coordinates


@dataclass(frozen=True)
class UserPosition:
    """Latitude/longitude reading with optional accuracy.

    Attributes:
        latitude: Decimal degrees in [-90, 90]
        longitude: Decimal degrees in [-180, 180]
        accuracy_m: Reported accuracy radius in meters, if the host gave one
    """

    latitude: float
    longitude: float
    accuracy_m: float | None = None

    def __post_init__(self) -> None:
        validate_coordinates(latitude=self.latitude, longitude=self.longitude)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.longitude, self.latitude)

    def __str__(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"
