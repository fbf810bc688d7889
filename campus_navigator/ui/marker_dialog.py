"""Add-marker dialog.

Rendered on every run while MarkerFormStateMachine is not closed. Dismissing
it with the X runs the same cancel as the Cancel button. The form
fields are prefilled from the kept draft so a failed save can be retried
without retyping. Every button ends with a rerun; the next run redraws the
dialog (or not) from the machine's state.
"""

import logging

import streamlit as st

from campus_navigator.constants import MarkerConfig
from campus_navigator.model.custom_marker import MarkerDraft
from campus_navigator.ui import infra
from campus_navigator.ui.actions import cancel_marker_dialog, submit_marker
from campus_navigator.ui.context import NavigatorContext

logger = logging.getLogger(__name__)


def dismiss_marker_dialog() -> None:
    """Closing with the X discards the draft like Cancel does."""
    nav: NavigatorContext = st.session_state.navigator
    logger.info("[MARKER] Dialog dismissed")
    cancel_marker_dialog(nav)


@st.dialog("Add Custom Marker", on_dismiss=dismiss_marker_dialog)
def marker_dialog(nav: NavigatorContext) -> None:
    """Show the add-marker form for the current draft."""
    form_ctx = nav.form_context
    draft = form_ctx.draft

    if nav.marker_form.is_failed and form_ctx.error is not None:
        form_ctx.error.display()
    if form_ctx.validation is not None:
        st.warning(f"{form_ctx.validation.icon} {form_ctx.validation.message}")

    with st.form("add_marker_form", border=False):
        name = st.text_input("Name *", value=draft.name, placeholder="e.g. My study spot")
        description = st.text_area("Description", value=draft.description)
        col_lat, col_lon = st.columns(2)
        with col_lat:
            latitude_text = st.text_input(
                "Latitude *",
                value=draft.latitude_text,
                placeholder=MarkerConfig.LATITUDE_PLACEHOLDER,
            )
        with col_lon:
            longitude_text = st.text_input(
                "Longitude *",
                value=draft.longitude_text,
                placeholder=MarkerConfig.LONGITUDE_PLACEHOLDER,
            )
        color = st.color_picker("Color", value=draft.color)
        save = st.form_submit_button(
            "🔁 Retry" if nav.marker_form.is_failed else "➕ Add Marker",
            type="primary",
            use_container_width=True,
        )

    if st.button("✖️ Cancel", use_container_width=True):
        cancel_marker_dialog(nav)
        infra.trigger_rerun()

    if save:
        new_draft = MarkerDraft(
            name=name,
            description=description,
            latitude_text=latitude_text,
            longitude_text=longitude_text,
            color=color,
        )
        with st.spinner("Saving marker..."):
            saved = submit_marker(nav, new_draft)
        if saved is not None:
            saved.display()
        infra.trigger_rerun()
