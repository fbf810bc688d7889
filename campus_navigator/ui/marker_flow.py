"""MarkerCreationFlow - Validate and save a new custom marker.

Flow:
1. Validate the draft at the input boundary (nothing is sent when invalid)
2. Send owner id + fields + the fixed icon tag to the data store
3. On success: re-load the owner's markers, close the dialog
4. On failure: keep the draft, show a blocking error, allow retry

Dialog visibility and progress live in MarkerFormStateMachine, never in
loose booleans.
"""

import logging

from campus_navigator.constants import MarkerConfig
from campus_navigator.core.catalog_store import CatalogStore
from campus_navigator.data.campus_store import CampusDataStore, DataAccessError
from campus_navigator.model.custom_marker import MarkerDraft
from campus_navigator.model.message import MarkerSavedMessage, SignInRequiredMessage
from campus_navigator.ui.state_machine import MarkerFormStateMachine
from campus_navigator.ui.validators import parse_coordinate, validate_marker_draft

logger = logging.getLogger(__name__)


class MarkerCreationFlow:
    """Orchestrates the add-marker dialog against the data store.

    Example:
        flow = MarkerCreationFlow(store=store, catalog_store=catalog_store, form=form_sm)
        flow.open()
        saved = run_async(flow.submit(owner_id="user-1", draft=draft))
    """

    def __init__(
        self,
        store: CampusDataStore,
        catalog_store: CatalogStore,
        form: MarkerFormStateMachine,
    ) -> None:
        self.store = store
        self.catalog_store = catalog_store
        self.form = form

    def open(self) -> None:
        """Show the dialog with an empty draft."""
        self.form.try_transition("open_form")

    def cancel(self) -> None:
        """Close the dialog, discarding the draft."""
        self.form.try_transition("cancel")

    def edit(self) -> None:
        """Leave the error state and go back to editing the kept draft."""
        self.form.try_transition("edit")

    async def submit(self, owner_id: str | None, draft: MarkerDraft) -> bool:
        """Validate and save the draft.

        Args:
            owner_id: Signed-in user; None blocks the save
            draft: Form input as typed

        Returns:
            True if the marker was stored, False otherwise. Validation problems
            are left in form.context.validation, save failures in form.context.error.
        """
        ctx = self.form.context
        if owner_id is None:
            ctx.draft = draft
            ctx.validation = SignInRequiredMessage()
            return False

        problem = validate_marker_draft(draft)
        if problem is not None:
            ctx.draft = draft
            ctx.validation = problem
            logger.info(f"[MARKER] Draft rejected: {problem.message}")
            return False

        if not self.form.try_transition("submit", draft=draft):
            return False

        latitude = parse_coordinate(draft.latitude_text)
        longitude = parse_coordinate(draft.longitude_text)
        assert latitude is not None and longitude is not None, "validated coordinates must parse"

        try:
            await self.store.create_custom_marker(
                owner_id=owner_id,
                name=draft.name.strip(),
                description=draft.description,
                latitude=latitude,
                longitude=longitude,
                color=draft.color,
                icon=MarkerConfig.ICON,
            )
        except DataAccessError as e:
            logger.error(f"[MARKER] Error adding marker: {e}")
            if self.catalog_store.lifetime.accepts_results("create_custom_marker"):
                self.form.fail(detail=e.detail)
            return False
        except Exception as e:
            # Leave Submitting so the kept draft can be retried or cancelled
            logger.error(f"[MARKER] Unexpected error adding marker: {type(e).__name__}: {e}")
            self.form.fail(detail=f"{type(e).__name__}: {e}")
            raise

        await self.catalog_store.load_custom_markers(owner_id)
        if self.catalog_store.lifetime.accepts_results("create_custom_marker"):
            self.form.succeed()
            logger.info(f"[MARKER] Saved '{draft.name.strip()}' for owner {owner_id}")
        return True

    @staticmethod
    def saved_message(draft: MarkerDraft) -> MarkerSavedMessage:
        """Confirmation toast for a stored draft."""
        return MarkerSavedMessage(name=draft.name.strip())
