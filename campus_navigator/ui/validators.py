"""Validators - Input validation for the add-marker form.

Validators return Optional[ToastMessage]:
- None if valid
- A message if invalid (caller displays it)

Design Principles:
- No exceptions for expected validation failures
- Messages know their own display level
- Caller controls when/how to display the message
"""

from math import isfinite

from campus_navigator.model.custom_marker import MarkerDraft, is_hex_color
from campus_navigator.model.message import (
    CoordinateOutOfRangeMessage,
    InvalidColorMessage,
    InvalidCoordinateMessage,
    MarkerNameRequiredMessage,
    ToastMessage,
)


def parse_coordinate(raw: str) -> float | None:
    """Parse coordinate text; None when empty, non-numeric or not finite."""
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if isfinite(value) else None


def validate_marker_name(name: str) -> ToastMessage | None:
    """Name must contain something besides whitespace."""
    if not name.strip():
        return MarkerNameRequiredMessage()
    return None


def validate_coordinate(field_name: str, raw: str, limit: float) -> ToastMessage | None:
    """Validate latitude/longitude text.

    Args:
        field_name: "Latitude" or "Longitude" (shown to the user)
        raw: Text as typed
        limit: Absolute bound (90 or 180)

    Returns:
        None if valid, InvalidCoordinateMessage if missing/non-numeric,
        CoordinateOutOfRangeMessage if outside [-limit, limit].
    """
    value = parse_coordinate(raw)
    if value is None:
        return InvalidCoordinateMessage(field_name=field_name, raw_value=raw)
    if not -limit <= value <= limit:
        return CoordinateOutOfRangeMessage(field_name=field_name, value=value, limit=limit)
    return None


def validate_marker_color(color: str) -> ToastMessage | None:
    """Color must be "#rgb" or "#rrggbb"."""
    if not is_hex_color(color):
        return InvalidColorMessage(color=color)
    return None


def validate_marker_draft(draft: MarkerDraft) -> ToastMessage | None:
    """Validate the whole form, returning the first problem found."""
    return (
        validate_marker_name(draft.name)
        or validate_coordinate(field_name="Latitude", raw=draft.latitude_text, limit=90.0)
        or validate_coordinate(field_name="Longitude", raw=draft.longitude_text, limit=180.0)
        or validate_marker_color(draft.color)
    )
