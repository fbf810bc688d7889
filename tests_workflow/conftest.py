"""Shared pytest fixtures for campus_navigator workflow tests.

Provides InMemoryCampusStore, ScriptedPositionSource and a campus catalog
for multi-component scenarios.
Minimal fixtures: keep conftest.py minimal.

COORDINATE SYSTEM:
    Tests use coordinates around the SRM campus overview center
    (12.8230, 80.0408). 0.001 degree of latitude is about 111 m.
"""

import asyncio

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


class InMemoryCampusStore(CampusDataStore):
    """CampusDataStore over plain lists.

    failures: queue of errors for upcoming create calls, consumed one per call.
    catalog_delay_s / markers_delay_s: simulated network latency per read.
    """

    def __init__(
        self,
        catalog: list[PointOfInterest],
        markers: list[CustomMarker] | None = None,
        catalog_delay_s: float = 0.0,
        markers_delay_s: float = 0.0,
    ) -> None:
        self.catalog = list(catalog)
        self.markers = list(markers or [])
        self.catalog_delay_s = catalog_delay_s
        self.markers_delay_s = markers_delay_s
        self.failures: list[DataAccessError] = []
        self.reads_failing = False
        self.create_calls = 0

    async def read_catalog(self) -> list[PointOfInterest]:
        await asyncio.sleep(self.catalog_delay_s)
        if self.reads_failing:
            raise DataAccessError("read_catalog", "service unavailable", status=503)
        return sorted(self.catalog, key=lambda poi: poi.name)

    async def read_custom_markers(self, owner_id: str) -> list[CustomMarker]:
        await asyncio.sleep(self.markers_delay_s)
        if self.reads_failing:
            raise DataAccessError("read_custom_markers", "service unavailable", status=503)
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
        self.create_calls += 1
        if self.failures:
            raise self.failures.pop(0)
        self.markers.append(
            CustomMarker(
                id=f"cm-{self.create_calls}",
                owner_id=owner_id,
                name=name,
                description=description,
                latitude=latitude,
                longitude=longitude,
                color=color,
                icon=icon,
            )
        )


class ScriptedPositionSource(PositionSource):
    """Answers requests from a script of positions and failures, in order."""

    def __init__(self, script: list[UserPosition | LocationFailure]) -> None:
        self.script = list(script)

    async def current_position(self) -> UserPosition:
        step = self.script.pop(0)
        if isinstance(step, LocationFailure):
            raise LocationError(step, "scripted")
        return step


@pytest.fixture
def campus_catalog() -> list[PointOfInterest]:
    """Eight locations spread north and east of the center."""

    def poi(poi_id: str, name: str, category: Category, dlat: float, dlon: float = 0.0, **kwargs) -> PointOfInterest:
        return PointOfInterest(
            id=poi_id,
            name=name,
            category=category,
            description=kwargs.pop("description", ""),
            latitude=CENTER_LAT + dlat,
            longitude=CENTER_LON + dlon,
            **kwargs,
        )

    return [
        poi("ub", "University Building", Category.ADMINISTRATIVE, 0.0008, description="Admissions and exams office", building_code="UB", is_frequently_used=True),
        poi("lib", "Central Library", Category.ACADEMIC, 0.0012, description="Main reading rooms", building_code="CL", is_frequently_used=True),
        poi("tp", "Tech Park", Category.ACADEMIC, 0.0025, 0.001, description="Computer science labs", building_code="TP"),
        poi("bh", "Boys Hostel", Category.HOSTEL, 0.004, description="Block A rooms"),
        poi("java", "Java Canteen", Category.FOOD_AND_DINING, 0.0015, 0.002, description="Snacks and coffee", is_frequently_used=True),
        poi("gym", "Gymnasium", Category.SPORTS, 0.006, -0.001, description="Indoor courts"),
        poi("hosp", "SRM Hospital", Category.HEALTHCARE, 0.009, 0.003, description="Emergency and outpatient care"),
        poi("atm", "SBI ATM", Category.BANKING, 0.0018, 0.0005, description="Cash withdrawal"),
    ]


@pytest.fixture
def memory_store(campus_catalog: list[PointOfInterest]) -> InMemoryCampusStore:
    return InMemoryCampusStore(catalog=campus_catalog)


@pytest.fixture
def center() -> UserPosition:
    return UserPosition(latitude=CENTER_LAT, longitude=CENTER_LON, accuracy_m=12.0)


@pytest.fixture
def navigator(memory_store: InMemoryCampusStore, center: UserPosition) -> NavigatorContext:
    """Signed-in session whose first location request succeeds."""
    return NavigatorContext.create(
        store=memory_store,
        source=ScriptedPositionSource([center]),
        owner_id="student-42",
        add_logger=False,
    )


@pytest.fixture
def scripted_source() -> type[ScriptedPositionSource]:
    return ScriptedPositionSource


@pytest.fixture
def store_cls() -> type[InMemoryCampusStore]:
    return InMemoryCampusStore
