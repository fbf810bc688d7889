"""Infrastructure utilities for Streamlit UI operations.

This module abstracts Streamlit-specific infrastructure (st.rerun, the
event loop) to enable mockability in tests while keeping actions.py as the
orchestrator.

Pattern: Actions import from this module. Tests patch these functions
instead of every place where st.rerun or asyncio.run would be called.

IMPORTANT: Only infrastructure belongs here (rerun, async bridge).
- Session state object access stays in actions.py
- UI presentation (st.spinner) stays in the app.py caller
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

import streamlit as st

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Drive one coroutine to completion from the synchronous Streamlit script.

    Every user action gets its own event loop; nothing is left running
    between reruns.
    """
    return asyncio.run(coro)


def trigger_rerun(scope: str = "app") -> None:
    """Trigger Streamlit rerun with optional scope.

    This is a mockable wrapper around st.rerun() for testability.
    In tests, patch 'campus_navigator.ui.infra.trigger_rerun' to prevent
    actual reruns (which raise StopExecution).

    Args:
        scope: Rerun scope - "app" for full rerun, "fragment" for partial.
    """
    st.rerun(scope=scope)
