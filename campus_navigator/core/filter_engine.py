"""FilterEngine - Pure filtering of the catalog by the current criteria.

Three conjunctive predicates, each short-circuiting to "pass" when inactive:
1. Category: exact match unless the selector is "All"
2. Frequency: only frequently used locations when enabled
3. Text: case-insensitive substring of name, description or building code

One linear pass, input order preserved. Recomputed from scratch on every
criteria change; at campus scale no incremental index is needed.
"""

from collections.abc import Iterable

from campus_navigator.constants import CategoryConfig
from campus_navigator.model.filter_criteria import FilterCriteria
from campus_navigator.model.point_of_interest import Category, PointOfInterest


def matches_category(poi: PointOfInterest, category: Category | str) -> bool:
    """Category predicate ("All" passes everything)."""
    if category == CategoryConfig.ALL:
        return True
    return poi.category == category


def matches_frequency(poi: PointOfInterest, frequent_only: bool) -> bool:
    """Frequency predicate (disabled passes everything)."""
    return poi.is_frequently_used or not frequent_only


def matches_query(poi: PointOfInterest, query: str) -> bool:
    """Text predicate (empty query passes everything).

    A missing building code never matches.
    """
    if not query:
        return True
    needle = query.lower()
    if needle in poi.name.lower() or needle in poi.description.lower():
        return True
    return poi.building_code is not None and needle in poi.building_code.lower()


def filter_catalog(
    catalog: Iterable[PointOfInterest],
    criteria: FilterCriteria,
) -> tuple[PointOfInterest, ...]:
    """Return the catalog items passing all predicates, in input order.

    Args:
        catalog: Catalog snapshot (any iterable, consumed once)
        criteria: Current filter criteria

    Returns:
        Order-preserving subsequence of the catalog.
    """
    return tuple(
        poi
        for poi in catalog
        if matches_category(poi, criteria.category)
        and matches_frequency(poi, criteria.frequent_only)
        and matches_query(poi, criteria.query)
    )
