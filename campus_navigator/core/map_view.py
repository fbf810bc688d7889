"""Explicit recomputation of the visible location list.

Replaces implicit recompute-on-change: whoever owns catalog, criteria and
position calls compute_visible_items() after any of them changes. The call
is pure and idempotent, so redundant invocations are harmless.
"""

from collections.abc import Iterable

from campus_navigator.core.filter_engine import filter_catalog
from campus_navigator.core.proximity import AnnotatedPoint, annotate_distances
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.point_of_interest import PointOfInterest
from campus_navigator.model.user_position import UserPosition


def compute_visible_items(
    catalog: Iterable[PointOfInterest],
    criteria: FilterCriteria,
    position: UserPosition | None,
) -> tuple[AnnotatedPoint, ...]:
    """Filter the catalog, then annotate distances."""
    return annotate_distances(filter_catalog(catalog, criteria), position)


def visible_selection(items: Iterable[AnnotatedPoint], selected_id: str | None) -> AnnotatedPoint | None:
    """Return the selected item if it is in the visible list.

    A stale selection (filtered out since it was made) resolves to None.
    """
    if selected_id is None:
        return None
    for item in items:
        if item.id == selected_id:
            return item
    return None
