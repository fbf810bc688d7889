"""FilterCriteria - The current combination of map filters.

A value object: every UI interaction builds a new FilterCriteria instead of
editing fields in place. Nothing is persisted; a reload starts from the
identity criteria (all categories, empty query, frequent-only off).
"""

from dataclasses import dataclass, replace

from campus_navigator.constants import CategoryConfig
from campus_navigator.model.point_of_interest import Category


@dataclass(frozen=True)
class FilterCriteria:
    """Category selector, free-text query and frequency toggle.

    Attributes:
        category: A Category, or CategoryConfig.ALL for no category filter
        query: Free-text search (empty = no text filter)
        frequent_only: Only show frequently used locations
    """

    category: Category | str = CategoryConfig.ALL
    query: str = ""
    frequent_only: bool = False

    def __post_init__(self) -> None:
        """Normalize category strings to the enum; reject unknown ones."""
        if self.category != CategoryConfig.ALL and not isinstance(self.category, Category):
            # Frozen dataclass: normalize through object.__setattr__
            object.__setattr__(self, "category", Category(self.category))

    @property
    def is_identity(self) -> bool:
        """True when no predicate restricts anything."""
        return self.category == CategoryConfig.ALL and not self.query and not self.frequent_only

    def with_category(self, category: Category | str) -> "FilterCriteria":
        return replace(self, category=category)

    def with_query(self, query: str) -> "FilterCriteria":
        return replace(self, query=query)

    def with_frequent_only(self, frequent_only: bool) -> "FilterCriteria":
        return replace(self, frequent_only=frequent_only)
