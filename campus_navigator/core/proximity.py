"""ProximityAnnotator - Live distance from the user to each listed location.

Purely additive: every input item comes back, in the same order, with a
derived distance (or None while no position is known). A large distance
never removes an item. Distances are not persisted; they are recomputed
whenever the position, criteria or catalog change.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from campus_navigator.core.geo_calculator import distance_meters, format_distance
from campus_navigator.model.point_of_interest import PointOfInterest
from campus_navigator.model.user_position import UserPosition


@dataclass(frozen=True)
class AnnotatedPoint:
    """A filtered location plus its distance from the user.

    Attributes:
        poi: The catalog location
        distance_m: Great-circle distance in meters, None without a position
    """

    poi: PointOfInterest
    distance_m: float | None = None

    @property
    def id(self) -> str:
        return self.poi.id

    @property
    def distance_label(self) -> str | None:
        """Display label ("111m", "1.5km") or None."""
        if self.distance_m is None:
            return None
        return format_distance(self.distance_m)


def annotate_distances(
    items: Iterable[PointOfInterest],
    position: UserPosition | None,
) -> tuple[AnnotatedPoint, ...]:
    """Attach distances to items without excluding or reordering any."""
    if position is None:
        return tuple(AnnotatedPoint(poi=poi) for poi in items)
    return tuple(AnnotatedPoint(poi=poi, distance_m=distance_meters(position, poi)) for poi in items)
