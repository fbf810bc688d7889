"""State machines for the campus map UI.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Entry/exit hooks for side effects
- Explicit event-driven transitions

Two independent machines, each with its own context (model pattern):

ViewportStateMachine - camera focus
    States:
        IDLE: No focused item, camera shows the campus overview (wide zoom)
        FOCUSED: Camera centered on the selected item (close zoom)
    Transitions:
        IDLE -> FOCUSED: select
        FOCUSED -> FOCUSED: select (another or the same item)
    There is no deselect event; a reloaded view starts in IDLE again.

MarkerFormStateMachine - add-marker dialog
    States:
        CLOSED: Dialog hidden
        CREATING: Dialog open, user editing the draft
        SUBMITTING: Save request in flight
        ERROR: Save failed, draft kept for retry
    Transitions:
        CLOSED -> CREATING: open_form
        CREATING -> SUBMITTING, ERROR -> SUBMITTING: submit
        SUBMITTING -> CLOSED: succeed
        SUBMITTING -> ERROR: fail
        ERROR -> CREATING: edit
        CREATING -> CLOSED, ERROR -> CLOSED: cancel

Camera moves are emitted as immutable CameraCommand values; the map
renderer applies the newest one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from campus_navigator.constants import MapConfig
from campus_navigator.model.custom_marker import CustomMarker, MarkerDraft
from campus_navigator.model.message import MarkerSaveFailedMessage, ToastMessage
from campus_navigator.model.point_of_interest import PointOfInterest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraCommand:
    """Where the map camera should go and how.

    Attributes:
        latitude: Target center latitude
        longitude: Target center longitude
        zoom: Target zoom level
        animated: True for a "fly" transition, False for an instant jump
        duration_ms: Transition duration (0 when not animated)
    """

    latitude: float
    longitude: float
    zoom: int
    animated: bool = False
    duration_ms: int = 0

    @staticmethod
    def overview() -> CameraCommand:
        """Campus overview at the wide zoom, no animation."""
        return CameraCommand(
            latitude=MapConfig.START_CENTER_LAT,
            longitude=MapConfig.START_CENTER_LON,
            zoom=MapConfig.OVERVIEW_ZOOM,
        )

    @staticmethod
    def fly_to(latitude: float, longitude: float) -> CameraCommand:
        """Animated flight to a point at the fixed close zoom."""
        return CameraCommand(
            latitude=latitude,
            longitude=longitude,
            zoom=MapConfig.FOCUS_ZOOM,
            animated=True,
            duration_ms=MapConfig.FLY_DURATION_MS,
        )


@dataclass
class ViewportContext:
    """Shared model for ViewportStateMachine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model.
    """

    state: str | None = None
    focused_id: str | None = None
    camera: CameraCommand = field(default_factory=CameraCommand.overview)

    def issue(self, camera: CameraCommand) -> None:
        self.camera = camera


@dataclass
class MarkerFormContext:
    """Shared model for MarkerFormStateMachine."""

    state: str | None = None
    draft: MarkerDraft = field(default_factory=MarkerDraft)
    error: MarkerSaveFailedMessage | None = None
    validation: ToastMessage | None = None


class TransitionLogger:
    """Listener logging every state transition.

    Usage:
        sm = ViewportStateMachine()
        sm.add_listener(TransitionLogger(name="viewport"))
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {self.name}: {source.name} --({event})--> {target.name}")


class ViewportStateMachine(StateMachine):
    """Camera focus state machine. See module docstring for transitions."""

    idle = State("Idle", initial=True)
    focused = State("Focused")

    select = idle.to(focused) | focused.to(focused)

    def __init__(self, context: ViewportContext | None = None) -> None:
        model = context or ViewportContext()
        super().__init__(model=model)

    @property
    def context(self) -> ViewportContext:
        """Alias for model."""
        return self.model

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_focused(self) -> bool:
        return self.focused.is_active

    @property
    def focused_id(self) -> str | None:
        return self.context.focused_id

    def on_enter_idle(self) -> None:
        """Hook: Entering idle state - overview camera."""
        self.context.focused_id = None
        self.context.issue(CameraCommand.overview())

    def before_select(self, item_id: str, latitude: float, longitude: float) -> None:
        """Action before focusing an item - fly the camera to it."""
        self.context.focused_id = item_id
        self.context.issue(CameraCommand.fly_to(latitude=latitude, longitude=longitude))

    def get_state_name(self) -> str:
        return self.current_state.name

    def __repr__(self) -> str:
        return f"ViewportStateMachine(state={self.get_state_name()}, focused={self.context.focused_id})"

    @staticmethod
    def create(add_logger: bool = True) -> tuple[ViewportStateMachine, ViewportContext]:
        """Factory method creating the machine with its context.

        Args:
            add_logger: If True, adds a TransitionLogger listener.
        """
        context = ViewportContext()
        sm = ViewportStateMachine(context=context)
        if add_logger:
            sm.add_listener(TransitionLogger(name="viewport"))
        return sm, context


def select_item(sm: ViewportStateMachine, item: PointOfInterest | CustomMarker) -> None:
    """Focus the camera on a catalog location or custom marker."""
    sm.select(item_id=item.id, latitude=item.latitude, longitude=item.longitude)


class MarkerFormStateMachine(StateMachine):
    """Add-marker dialog state machine. See module docstring for transitions."""

    closed = State("Closed", initial=True)
    creating = State("Creating")
    submitting = State("Submitting")
    failed = State("Error")

    open_form = closed.to(creating)
    submit = creating.to(submitting) | failed.to(submitting)
    succeed = submitting.to(closed)
    fail = submitting.to(failed)
    edit = failed.to(creating)
    cancel = creating.to(closed) | failed.to(closed)

    def __init__(self, context: MarkerFormContext | None = None) -> None:
        model = context or MarkerFormContext()
        super().__init__(model=model)

    @property
    def context(self) -> MarkerFormContext:
        """Alias for model."""
        return self.model

    @property
    def is_open(self) -> bool:
        """Dialog visible (any state but closed)."""
        return not self.closed.is_active

    @property
    def is_submitting(self) -> bool:
        return self.submitting.is_active

    @property
    def is_failed(self) -> bool:
        return self.failed.is_active

    def on_enter_closed(self) -> None:
        """Hook: dialog closed - forget the draft."""
        self.context.draft = MarkerDraft()
        self.context.error = None
        self.context.validation = None

    def on_enter_creating(self) -> None:
        self.context.error = None

    def before_submit(self, draft: MarkerDraft) -> None:
        self.context.draft = draft
        self.context.validation = None

    def before_fail(self, detail: str) -> None:
        self.context.error = MarkerSaveFailedMessage(detail=detail)

    def get_state_name(self) -> str:
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure."""
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"MarkerFormStateMachine(state={self.get_state_name()}, draft={self.context.draft!r})"

    @staticmethod
    def create(add_logger: bool = True) -> tuple[MarkerFormStateMachine, MarkerFormContext]:
        """Factory method creating the machine with its context."""
        context = MarkerFormContext()
        sm = MarkerFormStateMachine(context=context)
        if add_logger:
            sm.add_listener(TransitionLogger(name="marker_form"))
        return sm, context
