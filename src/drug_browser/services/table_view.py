"""Client-side sorting and pagination state for the drug list.

The API returns one page at a time; which column the page is sorted on and
which page is shown are presentation concerns tracked here. `TableState` is
immutable: every transition returns a new state, and sorting is re-derived
from the current items on each call.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from drug_browser.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from drug_browser.models.model_drug import DrugListItem, DrugListPage

SORTABLE_COLUMNS: tuple[str, ...] = (
    "product_name",
    "substance_name",
    "sponsor_name",
    "application_number",
    "route",
)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class TableState(BaseModel):
    """Sort column/direction and current page of the list view."""

    model_config = ConfigDict(frozen=True)

    sort_key: str | None = "product_name"
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    total: int = Field(default=0, ge=0)

    # -- Sorting ---------------------------------------------------------------

    def set_sort(self, key: str) -> TableState:
        """Toggle direction on the current column, or switch column in ascending order."""
        if key not in SORTABLE_COLUMNS:
            raise ValueError(f"Unknown sort column: {key!r}")
        if key == self.sort_key:
            direction = (
                SortDirection.DESC
                if self.sort_direction is SortDirection.ASC
                else SortDirection.ASC
            )
            return self.model_copy(update={"sort_direction": direction})
        return self.model_copy(
            update={"sort_key": key, "sort_direction": SortDirection.ASC}
        )

    def sort_items(self, items: list[DrugListItem]) -> list[DrugListItem]:
        """Items ordered by the current column; the same list when unsorted.

        Comparison is case-insensitive and a null cell compares as "".
        """
        if self.sort_key is None:
            return items
        key = self.sort_key
        return sorted(
            items,
            key=lambda item: (getattr(item, key) or "").casefold(),
            reverse=self.sort_direction is SortDirection.DESC,
        )

    # -- Pagination ------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.total

    def next_page(self) -> TableState:
        if not self.has_next:
            return self
        return self.model_copy(update={"page": self.page + 1})

    def previous_page(self) -> TableState:
        if not self.has_previous:
            return self
        return self.model_copy(update={"page": self.page - 1})

    def with_search(self) -> TableState:
        """A new search always starts again from the first page."""
        return self.model_copy(update={"page": 1, "total": 0})

    def with_page(self, listing: DrugListPage) -> TableState:
        """Adopt the pagination echoed back by the API."""
        return self.model_copy(
            update={
                "page": listing.page,
                "page_size": listing.page_size,
                "total": listing.total,
            }
        )
