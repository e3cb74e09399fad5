"""Public view models served by the API.

Attributes are snake_case in Python and serialize with camelCase keys.
"""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from drug_browser.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class _ViewModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


def _coerce_positive_int(raw: str | int | float | None, default: int) -> int:
    """Parse a loosely-typed query value; empty, zero, NaN or junk -> default."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value) or value == 0:
        return default
    return int(value)


class SearchQuery(_ViewModel):
    """Effective search parameters for one list request."""

    search: str | None = None
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        page: str | int | float | None = None,
        page_size: str | int | float | None = None,
    ) -> "SearchQuery":
        """Build a query from raw query-string values, clamping out-of-range input."""
        page_num = max(1, _coerce_positive_int(page, DEFAULT_PAGE))
        size_num = min(
            MAX_PAGE_SIZE, max(1, _coerce_positive_int(page_size, DEFAULT_PAGE_SIZE))
        )
        return cls(search=search, page=page_num, page_size=size_num)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def search_text(self) -> str | None:
        """Trimmed search text, or None when there is nothing to filter on."""
        if self.search is None:
            return None
        text = self.search.strip()
        return text or None


class DrugListItem(_ViewModel):
    """Summary row for one application: its primary product only."""

    id: str
    application_number: str | None = None
    sponsor_name: str | None = None
    product_name: str | None = None
    substance_name: str | None = None
    route: str | None = None


class DrugListPage(_ViewModel):
    page: int
    page_size: int
    total: int
    items: list[DrugListItem] = []


class DrugProduct(_ViewModel):
    brand_name: str | None = None
    generic_name: str | None = None
    route: str | None = None
    dosage_form: str | None = None
    marketing_status: str | None = None
    product_number: str | None = None
    te_code: str | None = None
    strength: str | None = None
    substances: list[str] = []


class DrugDocument(_ViewModel):
    type: str | None = None
    url: str | None = None
    effective_date: str | None = None  # YYYY-MM-DD


class DrugDetail(_ViewModel):
    """Full view of one application with products and dated documents."""

    application_number: str | None = None
    sponsor_name: str | None = None
    products: list[DrugProduct] = []
    documents: list[DrugDocument] = []
