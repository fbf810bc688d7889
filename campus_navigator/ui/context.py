"""Context for one campus map session.

NavigatorContext composes everything a Streamlit session owns:
- CatalogStore: loaded catalog + custom markers (survives UI resets)
- ViewportStateMachine: camera focus
- MarkerFormStateMachine + MarkerCreationFlow: add-marker dialog
- LiveLocationProvider: one-shot position requests
- FilterCriteria / UserPosition: replaced wholesale, never edited in place

Architecture:
- Contexts are data holders; actions.py mutates them
- The visible list is derived on demand with compute_visible_items(), never cached
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from campus_navigator.core.catalog_store import CatalogStore
from campus_navigator.core.location_provider import LiveLocationProvider, PositionSource
from campus_navigator.core.map_view import compute_visible_items
from campus_navigator.core.proximity import AnnotatedPoint
from campus_navigator.core.view_lifetime import ViewLifetime
from campus_navigator.data.campus_store import CampusDataStore
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.message import LocationFailedMessage
from campus_navigator.model.user_position import UserPosition
from campus_navigator.ui.marker_flow import MarkerCreationFlow
from campus_navigator.ui.state_machine import (
    MarkerFormContext,
    MarkerFormStateMachine,
    ViewportContext,
    ViewportStateMachine,
)

logger = logging.getLogger(__name__)


@dataclass
class NavigatorContext:
    """Everything one map view holds between reruns.

    Attributes:
        catalog_store: Loaded collections and their view lifetime
        viewport: Camera focus machine
        marker_form: Add-marker dialog machine
        marker_flow: Save orchestration for the dialog
        location_provider: Host position requests
        owner_id: Signed-in user, None when anonymous
        criteria: Current filter criteria
        position: Last successful position reading
        location_error: Last location failure, cleared on success
        data_loaded: True once the initial loads have run
        handled_map_pick: Last map pick acted on; the chart keeps reporting it on every rerun
    """

    catalog_store: CatalogStore
    viewport: ViewportStateMachine
    marker_form: MarkerFormStateMachine
    marker_flow: MarkerCreationFlow
    location_provider: LiveLocationProvider
    owner_id: str | None = None
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    position: UserPosition | None = None
    location_error: LocationFailedMessage | None = None
    data_loaded: bool = False
    handled_map_pick: str | None = None

    @property
    def viewport_context(self) -> ViewportContext:
        return self.viewport.context

    @property
    def form_context(self) -> MarkerFormContext:
        return self.marker_form.context

    def visible_items(self) -> tuple[AnnotatedPoint, ...]:
        """Filtered, distance-annotated catalog for the current criteria and position."""
        return compute_visible_items(
            catalog=self.catalog_store.catalog,
            criteria=self.criteria,
            position=self.position,
        )

    def reset_ui(self, add_logger: bool = True) -> None:
        """Fresh state machines and criteria; loaded data and position are kept."""
        self.viewport, _ = ViewportStateMachine.create(add_logger=add_logger)
        self.marker_form, _ = MarkerFormStateMachine.create(add_logger=add_logger)
        self.marker_flow = MarkerCreationFlow(
            store=self.catalog_store.store,
            catalog_store=self.catalog_store,
            form=self.marker_form,
        )
        self.criteria = FilterCriteria()
        self.location_error = None
        logger.info("[SESSION] UI state reset, loaded data preserved")

    @staticmethod
    def create(
        store: CampusDataStore,
        source: PositionSource | None,
        owner_id: str | None,
        add_logger: bool = True,
    ) -> NavigatorContext:
        """Factory wiring a fresh session around a data store and position source."""
        catalog_store = CatalogStore(store=store, lifetime=ViewLifetime(name="campus_map"))
        viewport, _ = ViewportStateMachine.create(add_logger=add_logger)
        marker_form, _ = MarkerFormStateMachine.create(add_logger=add_logger)
        return NavigatorContext(
            catalog_store=catalog_store,
            viewport=viewport,
            marker_form=marker_form,
            marker_flow=MarkerCreationFlow(store=store, catalog_store=catalog_store, form=marker_form),
            location_provider=LiveLocationProvider(source=source),
            owner_id=owner_id,
        )
