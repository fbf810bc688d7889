"""CatalogStore - The two loaded collections behind the campus map.

Holds the shared catalog and the signed-in user's custom markers. Each
collection is populated by its own async load; the loads are independent,
may finish in either order and each replaces only its own collection
wholesale. Read failures degrade to an empty collection and are logged,
never raised.
"""

import asyncio
import logging

from campus_navigator.core.view_lifetime import ViewLifetime
from campus_navigator.data.campus_store import CampusDataStore, DataAccessError
from campus_navigator.model.custom_marker import CustomMarker
from campus_navigator.model.point_of_interest import PointOfInterest

logger = logging.getLogger(__name__)


class CatalogStore:
    """Snapshot holder for the catalog and the user's custom markers.

    Example:
        catalog_store = CatalogStore(store=SupabaseCampusStore.from_config())
        run_async(catalog_store.load_all(owner_id="user-1"))
        catalog_store.catalog  # tuple[PointOfInterest, ...]
    """

    def __init__(self, store: CampusDataStore, lifetime: ViewLifetime | None = None) -> None:
        self.store = store
        self.lifetime = lifetime or ViewLifetime(name="catalog")
        self._catalog: tuple[PointOfInterest, ...] = ()
        self._custom_markers: tuple[CustomMarker, ...] = ()
        self._catalog_loaded = False

    @property
    def catalog(self) -> tuple[PointOfInterest, ...]:
        """Current catalog snapshot, ordered by name as delivered by the store."""
        return self._catalog

    @property
    def custom_markers(self) -> tuple[CustomMarker, ...]:
        """Current custom marker snapshot."""
        return self._custom_markers

    @property
    def catalog_loaded(self) -> bool:
        """True once a catalog load has finished (successfully or not)."""
        return self._catalog_loaded

    def find_item(self, item_id: str) -> PointOfInterest | CustomMarker | None:
        """Look up a catalog location or custom marker by id."""
        for poi in self._catalog:
            if poi.id == item_id:
                return poi
        for marker in self._custom_markers:
            if marker.id == item_id:
                return marker
        return None

    async def load_catalog(self) -> None:
        """Fetch the full catalog and replace the snapshot.

        On failure the catalog becomes empty (no partial data, no retry).
        """
        async with self.lifetime.track("load_catalog"):
            try:
                catalog = tuple(await self.store.read_catalog())
            except DataAccessError as e:
                logger.error(f"[LOAD] Error fetching locations: {e}")
                catalog = ()
            if not self.lifetime.accepts_results("load_catalog"):
                return
            self._catalog = catalog
            self._catalog_loaded = True
            logger.info(f"[LOAD] Catalog snapshot replaced: {len(catalog)} locations")

    async def load_custom_markers(self, owner_id: str | None) -> None:
        """Fetch markers owned by owner_id and replace the marker snapshot.

        Without an owner the markers are cleared and the store is not called.
        On failure the markers become empty.
        """
        if owner_id is None:
            if self.lifetime.accepts_results("load_custom_markers"):
                self._custom_markers = ()
            return
        async with self.lifetime.track("load_custom_markers"):
            try:
                markers = tuple(await self.store.read_custom_markers(owner_id))
            except DataAccessError as e:
                logger.error(f"[LOAD] Error fetching custom markers: {e}")
                markers = ()
            if not self.lifetime.accepts_results("load_custom_markers"):
                return
            self._custom_markers = markers
            logger.info(f"[LOAD] Custom markers replaced: {len(markers)} markers")

    async def load_all(self, owner_id: str | None) -> None:
        """Run both loads concurrently; completion order does not matter."""
        await asyncio.gather(
            self.load_catalog(),
            self.load_custom_markers(owner_id),
        )

    def __repr__(self) -> str:
        return (
            f"CatalogStore(catalog={len(self._catalog)}, markers={len(self._custom_markers)}, "
            f"loaded={self._catalog_loaded}, in_flight={self.lifetime.outstanding})"
        )
