"""Message - User-facing messages for the campus map UI.

Architecture:
- SIDEBAR: status of the location list (loading, nothing found, your position)
- MAP AREA: blocking errors the user must acknowledge (save failed, location failed)
- TOASTS: transient validation feedback from the add-marker form

Design Principles:
- Validators return a message instead of raising for expected failures
- Messages know their own display level (info/warning/error)
- Caller controls when/how to display the message
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status/loading
    WARNING = "warning"  # Yellow - configuration hints
    ERROR = "error"  # Red - failures needing acknowledgement


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for messages displayed inline (sidebar/map area).

    These messages are rendered as st.info/st.warning/st.error blocks that persist
    in the UI until replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: form validation failures, quick confirmations
    Bad for: failures the user has to acknowledge (use an ERROR Message)
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES - Add-marker form validation and confirmations
# =============================================================================


@dataclass(frozen=True)
class MarkerNameRequiredMessage(ToastMessage):
    """Marker name left empty."""

    @property
    def icon(self) -> str:
        return "✏️"

    @property
    def message(self) -> str:
        return "Name Required — Give your marker a name."


@dataclass(frozen=True)
class InvalidCoordinateMessage(ToastMessage):
    """Latitude or longitude missing or not a number."""

    field_name: str  # "Latitude" or "Longitude"
    raw_value: str

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        if not self.raw_value.strip():
            return f"{self.field_name} Required — Enter a number such as 12.8230."
        return f"Invalid {self.field_name} — '{self.raw_value}' is not a number."


@dataclass(frozen=True)
class CoordinateOutOfRangeMessage(ToastMessage):
    """Latitude or longitude outside its valid range."""

    field_name: str
    value: float
    limit: float  # Absolute bound: 90 for latitude, 180 for longitude

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        return f"{self.field_name} Out of Range — {self.value:g} (allowed: -{self.limit:g} to {self.limit:g})"


@dataclass(frozen=True)
class InvalidColorMessage(ToastMessage):
    """Marker color is not a hex color."""

    color: str

    @property
    def icon(self) -> str:
        return "🎨"

    @property
    def message(self) -> str:
        return f"Invalid Color — '{self.color}' (expected #rrggbb)"


@dataclass(frozen=True)
class SignInRequiredMessage(ToastMessage):
    """Custom markers need a signed-in owner."""

    @property
    def icon(self) -> str:
        return "🔒"

    @property
    def message(self) -> str:
        return "Sign In Required — Custom markers are saved to your account."


@dataclass(frozen=True)
class MarkerSavedMessage(ToastMessage):
    """Marker was stored successfully."""

    name: str

    @property
    def icon(self) -> str:
        return "📌"

    @property
    def message(self) -> str:
        return f"Marker Added — {self.name}"


# =============================================================================
# MAP AREA - Blocking errors (RED)
# =============================================================================


@dataclass(frozen=True)
class MarkerSaveFailedMessage(Message):
    """Store rejected the new marker. The form keeps the input for retry."""

    detail: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return f"**Error adding marker.** Please try again.\n\n_{self.detail}_"


@dataclass(frozen=True)
class LocationFailedMessage(Message):
    """Location request failed. Position stays unchanged."""

    reason: str  # LocationFailure value
    detail: str = ""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        if self.reason == "unsupported":
            text = "**Location is not supported on this device.**"
        elif self.reason == "timeout":
            text = "**Location request timed out.** Please try again."
        else:
            text = "**Unable to get your location.** Please enable location services."
        if self.detail:
            text += f"\n\n_{self.detail}_"
        return text


# =============================================================================
# SIDEBAR - Status messages (BLUE / YELLOW)
# =============================================================================


@dataclass(frozen=True)
class CatalogLoadingMessage(Message):
    """Shown until the first catalog load finishes."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "Loading locations..."


@dataclass(frozen=True)
class NoLocationsFoundMessage(Message):
    """Filtered list is empty (or the catalog could not be read)."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "No locations found"


@dataclass(frozen=True)
class UserPositionMessage(Message):
    """Current one-shot position reading."""

    latitude: float
    longitude: float

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return f"🧭 Your location: {self.latitude:.4f}, {self.longitude:.4f}"


@dataclass(frozen=True)
class DataStoreNotConfiguredMessage(Message):
    """SUPABASE_URL / SUPABASE_ANON_KEY missing."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return (
            "**Data store not configured.** Set `SUPABASE_URL` and `SUPABASE_ANON_KEY` "
            "to load campus locations."
        )
