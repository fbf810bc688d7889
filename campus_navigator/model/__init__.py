"""Data model classes for the campus map.

- PointOfInterest: Catalog location (immutable, validated on construction)
- Category: Closed category enumeration with display colors
- CustomMarker / MarkerDraft: User markers and the raw form input behind them
- FilterCriteria: Category + query + frequency filter value
- UserPosition: One position reading
- Message / ToastMessage: User-facing messages that render themselves
"""

from campus_navigator.model.custom_marker import CustomMarker, MarkerDraft
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.point_of_interest import Category, PointOfInterest
from campus_navigator.model.user_position import UserPosition

__all__ = [
    "Category",
    "PointOfInterest",
    "CustomMarker",
    "MarkerDraft",
    "FilterCriteria",
    "UserPosition",
]
