"""Remote data store boundary for campus locations and custom markers.

CampusDataStore is the contract the navigator consumes. SupabaseCampusStore
implements it against a Supabase project through its PostgREST API:

    GET  /rest/v1/campus_locations?select=*&order=name.asc
    GET  /rest/v1/custom_markers?select=*&user_id=eq.<owner>
    POST /rest/v1/custom_markers

Every failure (HTTP status >= 400, transport error, timeout, unreadable body,
malformed catalog row) surfaces as DataAccessError. A custom marker row that
does not parse is skipped with a warning; the owner's other markers still
load. Timeouts are owned here, not by callers.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import aiohttp

from campus_navigator.constants import DataStoreConfig, MarkerConfig
from campus_navigator.model.custom_marker import CustomMarker
from campus_navigator.model.point_of_interest import PointOfInterest

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """A read or write against the data store failed.

    Attributes:
        operation: Store operation name (e.g. "read_catalog")
        detail: Human-readable cause
        status: HTTP status when the store answered with an error
    """

    def __init__(self, operation: str, detail: str, status: int | None = None) -> None:
        self.operation = operation
        self.detail = detail
        self.status = status
        suffix = f" (HTTP {status})" if status is not None else ""
        super().__init__(f"{operation} failed{suffix}: {detail}")


def _as_rows(operation: str, body: Any) -> list[dict[str, Any]]:
    """Check a PostgREST select body is a list of row objects."""
    if body is None:
        return []
    if not isinstance(body, list) or not all(isinstance(row, dict) for row in body):
        raise DataAccessError(operation, f"expected a list of rows, got {type(body).__name__}")
    return body


class CampusDataStore(ABC):
    """Async contract of the remote data store."""

    @abstractmethod
    async def read_catalog(self) -> list[PointOfInterest]:
        """Full shared catalog ordered by name ascending."""

    @abstractmethod
    async def read_custom_markers(self, owner_id: str) -> list[CustomMarker]:
        """Markers owned by owner_id."""

    @abstractmethod
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
        """Insert a new marker owned by owner_id."""


class SupabaseCampusStore(CampusDataStore):
    """CampusDataStore over Supabase PostgREST using aiohttp.

    A fresh ClientSession is opened per request, so the store holds no
    connection state and is safe to share across reruns.

    Example:
        store = SupabaseCampusStore(base_url=DataStoreConfig.URL, api_key=DataStoreConfig.ANON_KEY)
        catalog = await store.read_catalog()
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        access_token: str | None = None,
        timeout_s: float = DataStoreConfig.TIMEOUT_S,
    ) -> None:
        """Initialize store.

        Args:
            base_url: Project URL, e.g. "https://xyz.supabase.co"
            api_key: Anonymous (public) API key
            access_token: Signed-in user's JWT; row-level security uses it. Falls back to api_key.
            timeout_s: Total timeout per request in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.access_token = access_token
        self.timeout = aiohttp.ClientTimeout(total=timeout_s)

    @classmethod
    def from_config(cls) -> "SupabaseCampusStore":
        """Build from DataStoreConfig (environment variables)."""
        return cls(
            base_url=DataStoreConfig.URL,
            api_key=DataStoreConfig.ANON_KEY,
            access_token=DataStoreConfig.ACCESS_TOKEN,
            timeout_s=DataStoreConfig.TIMEOUT_S,
        )

    def _table_url(self, table: str) -> str:
        return f"{self.base_url}{DataStoreConfig.REST_PATH}/{table}"

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token or self.api_key}",
            "Accept": "application/json",
        }

    async def _request(
        self,
        operation: str,
        method: str,
        table: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one PostgREST request and return the decoded JSON body (or None)."""
        headers = self._headers()
        if payload is not None:
            headers["Prefer"] = "return=minimal"
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.request(
                    method,
                    self._table_url(table),
                    params=params,
                    json=payload,
                    headers=headers,
                ) as response:
                    response_text = await response.text()
                    if response.status >= 400:
                        logger.error(f"[STORE] {operation}: HTTP {response.status} - {response_text[:200]}")
                        raise DataAccessError(operation, response_text[:200] or response.reason or "", response.status)
                    if not response_text:
                        return None
                    return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise DataAccessError(operation, "request timed out") from e
        except aiohttp.ClientError as e:
            raise DataAccessError(operation, str(e) or type(e).__name__) from e
        except ValueError as e:
            # Body that is not UTF-8 or not JSON, e.g. a captive portal page
            logger.error(f"[STORE] {operation}: unreadable response - {e}")
            raise DataAccessError(operation, f"unreadable response: {e}") from e

    async def read_catalog(self) -> list[PointOfInterest]:
        rows = await self._request(
            "read_catalog",
            "GET",
            DataStoreConfig.CATALOG_TABLE,
            params={"select": "*", "order": "name.asc"},
        )
        try:
            catalog = [PointOfInterest.from_row(row) for row in _as_rows("read_catalog", rows)]
        except ValueError as e:
            raise DataAccessError("read_catalog", str(e)) from e
        logger.info(f"[STORE] read_catalog: {len(catalog)} locations")
        return catalog

    async def read_custom_markers(self, owner_id: str) -> list[CustomMarker]:
        rows = await self._request(
            "read_custom_markers",
            "GET",
            DataStoreConfig.MARKERS_TABLE,
            params={"select": "*", "user_id": f"eq.{owner_id}"},
        )
        markers = []
        for row in _as_rows("read_custom_markers", rows):
            # Other clients may have stored rows this one cannot show; skip only those
            try:
                markers.append(CustomMarker.from_row(row))
            except ValueError as e:
                logger.warning(f"[STORE] read_custom_markers: skipping row {row.get('id')!r}: {e}")
        logger.info(f"[STORE] read_custom_markers: {len(markers)} markers for owner {owner_id}")
        return markers

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
        await self._request(
            "create_custom_marker",
            "POST",
            DataStoreConfig.MARKERS_TABLE,
            payload={
                "user_id": owner_id,
                "name": name,
                "description": description,
                "latitude": latitude,
                "longitude": longitude,
                "color": color,
                "icon": icon,
            },
        )
        logger.info(f"[STORE] create_custom_marker: '{name}' for owner {owner_id}")
