"""Shared pytest fixtures for campus_navigator tests.

Provides FakeCampusStore, FakePositionSource and a small campus catalog.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Tests use coordinates around the SRM campus overview center
    (12.8230, 80.0408). 0.001 degree of latitude is about 111 m, so
    expected distances can be read off the coordinates directly.
"""

import asyncio
from collections.abc import Callable

import pytest

from campus_navigator.constants import MarkerConfig
from campus_navigator.core.location_provider import LocationError, LocationFailure, PositionSource
from campus_navigator.data.campus_store import CampusDataStore, DataAccessError
from campus_navigator.model.custom_marker import CustomMarker
from campus_navigator.model.point_of_interest import Category, PointOfInterest
from campus_navigator.model.user_position import UserPosition
from campus_navigator.ui.context import NavigatorContext

CENTER_LAT = 12.8230
CENTER_LON = 80.0408


def make_poi(
    poi_id: str,
    category: Category = Category.ACADEMIC,
    name: str | None = None,
    description: str = "",
    latitude: float = CENTER_LAT,
    longitude: float = CENTER_LON,
    building_code: str | None = None,
    is_frequently_used: bool = False,
) -> PointOfInterest:
    """Build a PointOfInterest with sensible defaults."""
    return PointOfInterest(
        id=poi_id,
        name=name if name is not None else f"Location {poi_id}",
        category=category,
        description=description,
        latitude=latitude,
        longitude=longitude,
        building_code=building_code,
        is_frequently_used=is_frequently_used,
    )


def make_marker(marker_id: str, owner_id: str = "user-1", name: str | None = None) -> CustomMarker:
    return CustomMarker(
        id=marker_id,
        owner_id=owner_id,
        name=name if name is not None else f"Marker {marker_id}",
        description="",
        latitude=CENTER_LAT + 0.0005,
        longitude=CENTER_LON + 0.0005,
    )


# =============================================================================
# FAKE DATA STORE
# =============================================================================


class FakeCampusStore(CampusDataStore):
    """In-memory CampusDataStore with optional delays and failures.

    Delays let tests force a completion order between the two loads
    (e.g. markers before catalog). Created markers are appended to the
    owner's list so a re-load sees them.
    """

    def __init__(
        self,
        catalog: list[PointOfInterest] | None = None,
        markers: list[CustomMarker] | None = None,
        catalog_delay_s: float = 0.0,
        markers_delay_s: float = 0.0,
        fail_reads: bool = False,
        fail_create: bool = False,
    ) -> None:
        self.catalog = list(catalog or [])
        self.markers = list(markers or [])
        self.catalog_delay_s = catalog_delay_s
        self.markers_delay_s = markers_delay_s
        self.fail_reads = fail_reads
        self.fail_create = fail_create
        self.create_error: Exception | None = None
        self.completed: list[str] = []
        self.created: list[dict[str, object]] = []
        self.marker_reads: list[str] = []

    async def read_catalog(self) -> list[PointOfInterest]:
        await asyncio.sleep(self.catalog_delay_s)
        self.completed.append("catalog")
        if self.fail_reads:
            raise DataAccessError("read_catalog", "connection refused")
        return sorted(self.catalog, key=lambda poi: poi.name)

    async def read_custom_markers(self, owner_id: str) -> list[CustomMarker]:
        await asyncio.sleep(self.markers_delay_s)
        self.completed.append("markers")
        self.marker_reads.append(owner_id)
        if self.fail_reads:
            raise DataAccessError("read_custom_markers", "connection refused")
        return [marker for marker in self.markers if marker.owner_id == owner_id]

    async def create_custom_marker(
        self,
        owner_id: str,
        name: str,
        description: str,
        latitude: float,
        longitude: float,
        color: str,
        icon: str = MarkerConfig.ICON,
    ) -> None:
        call = {
            "owner_id": owner_id,
            "name": name,
            "description": description,
            "latitude": latitude,
            "longitude": longitude,
            "color": color,
            "icon": icon,
        }
        self.created.append(call)
        if self.create_error is not None:
            raise self.create_error
        if self.fail_create:
            raise DataAccessError("create_custom_marker", "insert rejected", status=500)
        self.markers.append(
            CustomMarker(
                id=f"m{len(self.markers) + 1}",
                owner_id=owner_id,
                name=name,
                description=description,
                latitude=latitude,
                longitude=longitude,
                color=color,
                icon=icon,
            )
        )


# =============================================================================
# FAKE POSITION SOURCE
# =============================================================================


class FakePositionSource(PositionSource):
    """Returns a fixed position, or raises the configured failure."""

    def __init__(
        self,
        position: UserPosition | None = None,
        failure: LocationFailure | None = None,
    ) -> None:
        self.position = position
        self.failure = failure
        self.calls = 0

    async def current_position(self) -> UserPosition:
        self.calls += 1
        if self.failure is not None:
            raise LocationError(self.failure, "fake failure")
        assert self.position is not None, "FakePositionSource needs a position or a failure"
        return self.position


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def campus_catalog() -> list[PointOfInterest]:
    """Five locations north of the center, 0.001 degree (~111 m) apart."""
    return [
        make_poi(
            "lib",
            Category.ACADEMIC,
            name="Central Library",
            description="Main reading rooms",
            latitude=CENTER_LAT + 0.001,
            building_code="CL",
            is_frequently_used=True,
        ),
        make_poi(
            "tp",
            Category.ACADEMIC,
            name="Tech Park",
            description="Computer science labs",
            latitude=CENTER_LAT + 0.002,
            building_code="TP-1",
        ),
        make_poi(
            "hostel",
            Category.HOSTEL,
            name="Boys Hostel",
            description="Block A rooms",
            latitude=CENTER_LAT + 0.003,
        ),
        make_poi(
            "java",
            Category.FOOD_AND_DINING,
            name="Java Canteen",
            description="Snacks and coffee",
            latitude=CENTER_LAT + 0.004,
            is_frequently_used=True,
        ),
        make_poi(
            "hospital",
            Category.HEALTHCARE,
            name="SRM Hospital",
            description="Emergency and outpatient care",
            latitude=CENTER_LAT + 0.005,
        ),
    ]


@pytest.fixture
def fake_store(campus_catalog: list[PointOfInterest]) -> FakeCampusStore:
    return FakeCampusStore(catalog=campus_catalog, markers=[make_marker("m0")])


@pytest.fixture
def center_position() -> UserPosition:
    return UserPosition(latitude=CENTER_LAT, longitude=CENTER_LON)


@pytest.fixture
def nav(fake_store: FakeCampusStore, center_position: UserPosition) -> NavigatorContext:
    """Session with the fake store, a working position source and a signed-in user."""
    return NavigatorContext.create(
        store=fake_store,
        source=FakePositionSource(position=center_position),
        owner_id="user-1",
        add_logger=False,
    )


# Factories exposed as fixtures so test modules never import conftest directly


@pytest.fixture
def poi_factory() -> Callable[..., PointOfInterest]:
    return make_poi


@pytest.fixture
def marker_factory() -> Callable[..., CustomMarker]:
    return make_marker


@pytest.fixture
def store_factory() -> type[FakeCampusStore]:
    return FakeCampusStore


@pytest.fixture
def source_factory() -> type[FakePositionSource]:
    return FakePositionSource
